import importlib

import pytest

from asciify import cli
from asciify.charsets import STANDARD
from tests.conftest import gradient_png


@pytest.fixture
def image_path(tmp_path):
    path = tmp_path / "gradient.png"
    path.write_bytes(gradient_png(20, 20))
    return path


@pytest.mark.parametrize("module_name", ["asciify.cli", "asciify.server"])
def test_entrypoint_help(module_name):
    module = importlib.import_module(module_name)
    with pytest.raises(SystemExit) as excinfo:
        module.main(["--help"])
    assert excinfo.value.code == 0


def test_prints_grid(image_path, capsys):
    cli.main([str(image_path), "-w", "10"])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert len(lines) == 4  # 20 / 2 * 0.45
    assert all(len(line) == 10 for line in lines)
    assert out.endswith("\n")


def test_tone_options(image_path, capsys):
    cli.main([str(image_path), "-w", "10"])
    plain = capsys.readouterr().out
    cli.main([str(image_path), "-w", "10", "--invert", "--gamma", "2", "--contrast", "0.5", "--brightness", "-0.2"])
    tuned = capsys.readouterr().out
    assert tuned != plain


def test_ramp_option(image_path, capsys):
    cli.main([str(image_path), "-w", "10", "--ramp", "standard"])
    assert set(capsys.readouterr().out) <= set(STANDARD + "\n")


def test_fit_uses_terminal_width(image_path, capsys, monkeypatch):
    monkeypatch.setattr(cli, "get_terminal_width", lambda: 12)
    cli.main([str(image_path), "--fit"])
    assert all(len(line) == 12 for line in capsys.readouterr().out.splitlines())


def test_output_file(image_path, tmp_path, capsys):
    out_path = tmp_path / "art.txt"
    cli.main([str(image_path), "-w", "10", "-o", str(out_path)])
    assert capsys.readouterr().out == ""
    assert len(out_path.read_text(encoding="utf-8").splitlines()) == 4


def test_png_export(image_path, tmp_path):
    png_path = tmp_path / "art.png"
    cli.main([str(image_path), "-w", "10", "--png", str(png_path)])
    assert png_path.read_bytes().startswith(b"\x89PNG")


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "nope.png")])
    assert excinfo.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_invalid_gamma(image_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(image_path), "--gamma", "0"])
    assert excinfo.value.code == 1
    assert "gamma" in capsys.readouterr().err


def test_undecodable_file(tmp_path, capsys):
    path = tmp_path / "notes.png"
    path.write_text("not an image")
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(path)])
    assert excinfo.value.code == 1
    assert "Could not decode" in capsys.readouterr().err
