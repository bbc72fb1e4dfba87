"""Persisted generator settings."""

import json
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class AssetConfig:
    generate_path: str | None = None
    generate_file_name: str | None = None
    exclude_path: list[str] = field(default_factory=list)

    CONFIG_DIR = ".assetgen"
    CONFIG_FILE = "config.json"

    def __post_init__(self) -> None:
        object.__setattr__(self, "generate_path", _blank_to_none(self.generate_path))
        object.__setattr__(self, "generate_file_name", _blank_to_none(self.generate_file_name))
        excludes: list[str] = []
        for path in self.exclude_path or []:
            if path and path.strip() and path not in excludes:
                excludes.append(path)
        object.__setattr__(self, "exclude_path", excludes)

    @classmethod
    def config_file(cls, project_path: Path | str) -> Path:
        return Path(project_path) / cls.CONFIG_DIR / cls.CONFIG_FILE

    @classmethod
    def load(cls, project_path: Path | str) -> "AssetConfig":
        config_path = cls.config_file(project_path)
        if not config_path.exists():
            return cls()
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e
        return cls.from_dict(data, source=config_path)

    @classmethod
    def from_dict(cls, data: dict, source: Path | str | None = None) -> "AssetConfig":
        where = f" in {source}" if source else ""
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a JSON object{where}")

        excludes = data.get("excludePath") or []
        if not isinstance(excludes, list) or not all(isinstance(p, str) for p in excludes):
            raise ValueError(f"'excludePath' must be a list of strings{where}")
        for key in ("generatePath", "generateFileName"):
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ValueError(f"'{key}' must be a string{where}")

        return cls(
            generate_path=data.get("generatePath"),
            generate_file_name=data.get("generateFileName"),
            exclude_path=excludes,
        )

    def to_dict(self) -> dict:
        return {
            "generatePath": self.generate_path,
            "generateFileName": self.generate_file_name,
            "excludePath": list(self.exclude_path),
        }

    def save(self, project_path: Path | str) -> Path:
        config_path = self.config_file(project_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
        return config_path

    def with_overrides(
        self,
        generate_path: str | None = None,
        generate_file_name: str | None = None,
        exclude_path: list[str] | None = None,
    ) -> "AssetConfig":
        """Copy with any non-None argument replacing the stored value."""
        return AssetConfig(
            generate_path=self.generate_path if generate_path is None else generate_path,
            generate_file_name=self.generate_file_name if generate_file_name is None else generate_file_name,
            exclude_path=self.exclude_path if exclude_path is None else exclude_path,
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()
