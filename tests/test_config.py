"""Tests for AssetConfig persistence."""

import json
from pathlib import Path

import pytest

from asset_refs.config import AssetConfig


class TestAssetConfig:
    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        config = AssetConfig.load(tmp_path)

        assert config == AssetConfig()
        assert config.exclude_path == []

    def test_save_and_load(self, tmp_path: Path) -> None:
        config = AssetConfig(generate_path="gen", generate_file_name="images", exclude_path=["assets/font/"])

        path = config.save(tmp_path)

        assert path == tmp_path / ".assetgen" / "config.json"
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "generatePath": "gen",
            "generateFileName": "images",
            "excludePath": ["assets/font/"],
        }
        assert AssetConfig.load(tmp_path) == config

    def test_blank_values_normalised(self) -> None:
        config = AssetConfig(generate_path="  ", generate_file_name="", exclude_path=["a/", "", " ", "a/", "b/"])

        assert config.generate_path is None
        assert config.generate_file_name is None
        assert config.exclude_path == ["a/", "b/"]

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = AssetConfig.config_file(tmp_path)
        path.parent.mkdir()
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid config file"):
            AssetConfig.load(tmp_path)

    def test_wrong_shape_raises(self) -> None:
        with pytest.raises(ValueError, match="excludePath"):
            AssetConfig.from_dict({"excludePath": "assets/font/"})

    def test_missing_keys_use_defaults(self) -> None:
        assert AssetConfig.from_dict({}) == AssetConfig()

    def test_with_overrides(self) -> None:
        base = AssetConfig(generate_path="gen", exclude_path=["a/"])

        assert base.with_overrides(generate_file_name="r").generate_path == "gen"
        assert base.with_overrides(generate_path="").generate_path is None
        assert base.with_overrides(exclude_path=["b/"]).exclude_path == ["b/"]
        assert base.with_overrides().exclude_path == ["a/"]
