"""Tests for the asset-refs command line."""

from pathlib import Path
from typing import Callable

import pytest

from asset_refs.config import AssetConfig
from asset_refs.runner import main


class TestRunner:
    def test_usage_without_arguments(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 1
        assert "Usage: asset-refs" in capsys.readouterr().out

    def test_unknown_argument(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path), "--bogus"]) == 1
        assert "Unknown argument: --bogus" in capsys.readouterr().out

    def test_successful_run(self, make_project: Callable[..., Path], capsys: pytest.CaptureFixture[str]) -> None:
        project = make_project(["assets/a.png"], pubspec="  assets:\n")

        assert main([str(project)]) == 0
        assert "Complete!" in capsys.readouterr().out
        assert (project / "lib" / "res.dart").exists()

    def test_failed_run(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path)]) == 1
        assert "No asset directory" in capsys.readouterr().out

    def test_options_override_saved_config(self, make_project: Callable[..., Path]) -> None:
        project = make_project(["assets/a.png", "assets/font/f.ttf"])
        AssetConfig(generate_file_name="saved").save(project)

        code = main([str(project), "--generate-path", "gen", "--exclude", "assets/font/", "-v"])

        output = project / "lib" / "gen" / "saved.dart"
        assert code == 0
        assert "f.ttf" not in output.read_text(encoding="utf-8")
        assert AssetConfig.load(project).generate_path is None

    def test_save_config(self, make_project: Callable[..., Path]) -> None:
        project = make_project(["assets/a.png"])

        assert main([str(project), "--file-name", "images", "--save-config"]) == 0
        assert AssetConfig.load(project).generate_file_name == "images"
        assert (project / "lib" / "images.dart").exists()
