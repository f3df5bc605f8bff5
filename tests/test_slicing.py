import numpy as np
import pytest

from pximage.slicing import RegionDescriptor, axis_name, extract_region, extract_slice, slice_region


def _volume() -> np.ndarray:
    return np.arange(3 * 4 * 5, dtype=np.int16).reshape(3, 4, 5)


def test_slice_region_collapses_the_extraction_axis() -> None:
    region = slice_region((3, 4, 5), axis=2, index=3)
    assert region.index == (0, 0, 3)
    assert region.size == (3, 4, 0)
    assert region.collapsed_axes == (2,)


def test_slice_region_rejects_out_of_range() -> None:
    with pytest.raises(ValueError):
        slice_region((3, 4, 5), axis=2, index=5)
    with pytest.raises(ValueError):
        slice_region((3, 4, 5), axis=3, index=0)


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_extract_slice_matches_numpy_take(axis: int) -> None:
    vol = _volume()
    sn = 1
    out = extract_slice(vol, axis, sn)
    assert out.shape == tuple(s for i, s in enumerate(vol.shape) if i != axis)
    assert np.array_equal(out, np.take(vol, sn, axis=axis))


def test_extract_slice_axis_semantics() -> None:
    vol = _volume()
    z_plane = extract_slice(vol, 2, 4)
    assert z_plane.shape == (3, 4)
    assert z_plane[2, 3] == vol[2, 3, 4]

    x_plane = extract_slice(vol, 0, 2)
    assert x_plane.shape == (4, 5)
    assert x_plane[1, 3] == vol[2, 1, 3]


def test_extract_region_copies_sub_volume() -> None:
    vol = _volume()
    region = RegionDescriptor(index=(1, 0, 2), size=(2, 4, 0))
    out = extract_region(vol, region)
    assert out.shape == (2, 4)
    assert np.array_equal(out, vol[1:3, :, 2])

    out[0, 0] = -1
    assert vol[1, 0, 2] != -1


def test_extract_region_rejects_region_outside_array() -> None:
    with pytest.raises(ValueError, match="exceeds"):
        extract_region(_volume(), RegionDescriptor(index=(2, 0, 0), size=(2, 4, 5)))
    with pytest.raises(ValueError):
        RegionDescriptor(index=(0, 0), size=(1, 1, 1))


def test_axis_name() -> None:
    assert [axis_name(a) for a in range(3)] == ["x", "y", "z"]
    with pytest.raises(ValueError):
        axis_name(3)
