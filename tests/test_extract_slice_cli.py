from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from pximage.extract_slice_cli import main
from pximage.io.image import array_to_image, image_to_array, read_image, read_image_properties, write_image


def _volume(dtype=np.int16) -> np.ndarray:
    return np.arange(3 * 4 * 5).reshape(3, 4, 5).astype(dtype)


def _write(path: Path, array: np.ndarray, **geometry) -> Path:
    write_image(array_to_image(array, **geometry), path)
    return path


def _read2d(path: Path, tag: str) -> np.ndarray:
    return image_to_array(read_image(path, component_type=tag, dimension=2))


def test_extract_slice_cli_prints_usage_for_too_few_tokens(capsys) -> None:
    assert main(["-in", "a.mha"]) == 1
    assert "extracts a 2D slice" in capsys.readouterr().out


@pytest.mark.parametrize("axis", [0, 1, 2])
def test_extract_slice_cli_axes(tmp_path, axis: int) -> None:
    vol = _volume()
    src = _write(tmp_path / "vol.mha", vol)
    out = tmp_path / f"slice{axis}.mha"

    code = main(["-in", str(src), "-out", str(out), "-sn", "2", "-d", str(axis)])
    assert code == 0

    result = _read2d(out, "short")
    assert np.array_equal(result, np.take(vol, 2, axis=axis))


def test_extract_slice_cli_default_output_and_geometry(tmp_path) -> None:
    vol = _volume(np.uint8)
    src = _write(tmp_path / "scan.mha", vol, spacing=(0.5, 0.75, 2.0), origin=(1.0, 2.0, 3.0))

    assert main(["-in", str(src), "-sn", "4"]) == 0

    out = tmp_path / "scan_slice_z=4.mha"
    assert out.exists()

    image = read_image(out, component_type="unsigned char", dimension=2)
    assert tuple(image.GetSize()) == (3, 4)
    assert tuple(image.GetSpacing()) == pytest.approx((0.5, 0.75))
    assert tuple(image.GetOrigin()) == pytest.approx((1.0, 2.0))
    assert np.array_equal(image_to_array(image), vol[:, :, 4])


def test_extract_slice_cli_pixel_type_override(tmp_path) -> None:
    src = _write(tmp_path / "vol.mha", _volume(np.uint8))
    out = tmp_path / "f.mha"

    assert main(["-in", str(src), "-out", str(out), "-sn", "0", "-pt", "float"]) == 0
    props = read_image_properties(out)
    assert props.component_type == "float"
    assert props.dimension == 2


def test_extract_slice_cli_rejects_out_of_range(tmp_path, capsys) -> None:
    src = _write(tmp_path / "vol.mha", _volume())
    out = tmp_path / "never.mha"

    assert main(["-in", str(src), "-out", str(out), "-sn", "5"]) == 1
    err = capsys.readouterr().err
    assert "slice number 5" in err
    assert "only has 5 slices in dimension 2" in err

    assert main(["-in", str(src), "-out", str(out), "-sn", "0", "-d", "3"]) == 1
    assert "dimension 3" in capsys.readouterr().err
    assert not out.exists()


def test_extract_slice_cli_missing_flags(tmp_path, capsys) -> None:
    src = _write(tmp_path / "vol.mha", _volume())
    out = tmp_path / "never.mha"

    assert main(["-out", str(out), "-sn", "1"]) == 1
    assert '"-in"' in capsys.readouterr().err

    assert main(["-in", str(src), "-out", str(out)]) == 1
    assert '"-sn"' in capsys.readouterr().err
    assert not out.exists()


def test_extract_slice_cli_rejects_2d_and_vector_inputs(tmp_path, capsys) -> None:
    import SimpleITK as sitk

    out = tmp_path / "never.mha"
    flat = _write(tmp_path / "flat.mha", np.zeros((4, 4), dtype=np.uint8))
    assert main(["-in", str(flat), "-out", str(out), "-sn", "0"]) == 1
    assert "3D" in capsys.readouterr().err

    rgb = tmp_path / "rgb.mha"
    sitk.WriteImage(
        sitk.GetImageFromArray(np.zeros((2, 4, 4, 3), dtype=np.uint8), isVector=True), str(rgb)
    )
    assert main(["-in", str(rgb), "-out", str(out), "-sn", "0"]) == 1
    assert "Vector images are not supported" in capsys.readouterr().err
    assert not out.exists()


def test_extract_slice_cli_unsupported_pixel_type(tmp_path, capsys) -> None:
    src = _write(tmp_path / "vol.mha", np.zeros((2, 2, 2), dtype=np.float64))
    out = tmp_path / "never.mha"

    assert main(["-in", str(src), "-out", str(out), "-sn", "0"]) == 1
    assert "Unsupported slice extraction input" in capsys.readouterr().err
    assert not out.exists()


def test_extract_slice_image_oblique_direction_is_orthonormal() -> None:
    import SimpleITK as sitk

    from pximage.extract_slice import extract_slice_image

    c, s = float(np.cos(0.3)), float(np.sin(0.3))
    image = array_to_image(_volume(), direction=(c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0))

    out = extract_slice_image(image, axis=0, slice_index=1)
    assert isinstance(out, sitk.Image)
    assert tuple(out.GetSize()) == (4, 5)

    direction = np.asarray(out.GetDirection()).reshape(2, 2)
    assert np.allclose(np.linalg.norm(direction, axis=0), 1.0)
    assert np.allclose(direction.T @ direction, np.eye(2))


def test_extract_slice_image_axis_aligned_direction_is_kept() -> None:
    from pximage.extract_slice import extract_slice_image

    image = array_to_image(_volume(), direction=(1.0, 0.0, 0.0, 0.0, -1.0, 0.0, 0.0, 0.0, 1.0))

    out = extract_slice_image(image, axis=2, slice_index=0)
    assert tuple(out.GetDirection()) == pytest.approx((1.0, 0.0, 0.0, -1.0))
