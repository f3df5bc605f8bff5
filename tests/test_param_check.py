import pytest


def test_check_int_in_range_enforces_bounds() -> None:
    from pximage.utils.param_check import check_int_in_range

    assert check_int_in_range(0, name="-d", low=0, high=3) == 0
    assert check_int_in_range(2, name="-d", low=0, high=3) == 2

    # Upper bound is exclusive.
    with pytest.raises(ValueError, match="-d"):
        check_int_in_range(3, name="-d", low=0, high=3)
    with pytest.raises(ValueError, match="-d"):
        check_int_in_range(-1, name="-d", low=0)

    with pytest.raises(TypeError):
        check_int_in_range(1.5, name="-d")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        check_int_in_range(True, name="-d")


def test_check_all_positive_rejects_zero_anywhere() -> None:
    from pximage.utils.param_check import check_all_positive

    assert check_all_positive([1, 2, 3], name="radius") == (1, 2, 3)

    with pytest.raises(ValueError, match="nonpositive"):
        check_all_positive([0, 1, 1], name="radius")
    with pytest.raises(ValueError, match="nonpositive"):
        check_all_positive([1, 0], name="radius")
    with pytest.raises(ValueError):
        check_all_positive([], name="radius")
