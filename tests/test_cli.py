import pytest

from rasterkit.cli import main
from rasterkit.tgaimage import TGAImage

OBJ_TEXT = """v -0.5 -0.5 -1
v 0.5 -0.5 -1
v 0 0.5 -1
vt 0 0 0
vt 1 0 0
vt 0 1 0
f 1/1/1 2/2/1 3/3/1
"""


def test_renders_model_to_file(tmp_path):
    (tmp_path / "tri.obj").write_text(OBJ_TEXT)
    out = tmp_path / "out.tga"
    assert main([str(tmp_path / "tri"), "--size", "32", "--output", str(out)]) == 0
    image = TGAImage.read_tga_file(out)
    assert (image.width, image.height, image.bytespp) == (32, 32, 3)
    assert any(image.buffer())


def test_model_without_faces_gives_blank_image(tmp_path):
    (tmp_path / "points.obj").write_text("v 0 0 0\nv 1 0 0\n")
    out = tmp_path / "blank.tga"
    assert main([str(tmp_path / "points"), "-s", "8", "-o", str(out)]) == 0
    image = TGAImage.read_tga_file(out)
    assert (image.width, image.height) == (8, 8)
    assert not any(image.buffer())


def test_default_model_and_output(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--size", "4"]) == 0
    image = TGAImage.read_tga_file(tmp_path / "output.tga")
    assert (image.width, image.height) == (4, 4)


def test_unwritable_output_returns_error(tmp_path):
    out = tmp_path / "no_such_dir" / "out.tga"
    assert main([str(tmp_path / "none"), "--size", "4", "--output", str(out)]) == 1
    assert not out.exists()


def test_rejects_non_positive_size(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "none"), "--size", "0"])
    assert info.value.code == 2