"""Tests for the bitavatar command line."""

import json

import pytest

from bitavatar.cli import build_parser, main, render_text
from bitavatar.core.grid import Avatar
from bitavatar.output.storage import get_avatar_path, load_avatar


@pytest.fixture
def config_file(tmp_path, avatar_folder):
    path = tmp_path / "bitavatar.json"
    path.write_text(json.dumps({
        "folder": str(avatar_folder),
        "base_url": "/static/",
        "width": 6,
        "height": 4,
        "method": "symmetric",
    }))
    return path


class TestRenderText:
    """Tests for render_text function."""

    def test_rows(self):
        avatar = Avatar.from_array([[1, 0, 1], [0, 1, 0]])
        assert render_text(avatar) == "#.#\n.#."

    def test_custom_chars(self):
        avatar = Avatar.from_array([[1, 0]])
        assert render_text(avatar, on="X", off=" ") == "X "


class TestParser:
    """Tests for build_parser."""

    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_generate_args(self):
        args = build_parser().parse_args(["generate", "bob", "--width", "3"])
        assert args.command == "generate"
        assert args.key == "bob"
        assert args.width == 3
        assert args.height is None


class TestMain:
    """Tests for main entry point."""

    def test_generate_uses_config_defaults(self, config_file, avatar_folder, capsys):
        assert main(["--config", str(config_file), "generate", "bob"]) == 0
        out = capsys.readouterr().out.strip()
        assert out == str(get_avatar_path(avatar_folder, "bob"))
        avatar = load_avatar(avatar_folder, "bob").avatar
        assert (avatar.width, avatar.height) == (6, 4)
        arr = avatar.to_array()
        assert (arr == arr[:, ::-1]).all()

    def test_generate_overrides(self, config_file, tmp_path, capsys):
        folder = tmp_path / "other"
        assert main([
            "--config", str(config_file), "generate", "bob",
            "--width", "3", "--height", "2", "--method", "none", "--folder", str(folder),
        ]) == 0
        avatar = load_avatar(folder, "bob").avatar
        assert (avatar.width, avatar.height) == (3, 2)

    def test_path(self, config_file, avatar_folder, capsys):
        assert main(["--config", str(config_file), "path", "bob"]) == 0
        assert capsys.readouterr().out.strip() == str(avatar_folder / "bob.png")

    def test_html(self, config_file, capsys):
        assert main(["--config", str(config_file), "html", "bob"]) == 0
        assert capsys.readouterr().out.strip() == (
            '<img src="/static/bob.png" width="6" height="4" alt="Avatar bob">'
        )

    def test_show(self, config_file, capsys):
        main(["--config", str(config_file), "generate", "bob"])
        capsys.readouterr()
        assert main(["--config", str(config_file), "show", "bob"]) == 0
        lines = capsys.readouterr().out.strip().split("\n")
        assert len(lines) == 4
        assert all(len(line) == 6 and set(line) <= {"#", "."} for line in lines)

    def test_delete(self, config_file, avatar_folder):
        main(["--config", str(config_file), "generate", "bob"])
        assert main(["--config", str(config_file), "delete", "bob"]) == 0
        assert not (avatar_folder / "bob.png").exists()

    def test_delete_missing_reports_error(self, config_file, capsys):
        assert main(["--config", str(config_file), "delete", "ghost"]) == 1
        assert "error: Avatar not found" in capsys.readouterr().err

    def test_invalid_dimensions_reports_error(self, config_file, capsys):
        assert main(["--config", str(config_file), "generate", "bob", "--width", "0"]) == 1
        assert "Invalid dimensions" in capsys.readouterr().err


class TestModuleEntryPoint:
    """Tests for python -m bitavatar."""

    def test_import_does_not_run_main(self, monkeypatch):
        import importlib

        called = []
        monkeypatch.setattr("bitavatar.cli.main", lambda argv=None: called.append(argv) or 0)
        importlib.import_module("bitavatar.__main__")
        assert called == []
