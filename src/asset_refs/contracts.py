"""Data contracts for the asset reference pipeline."""

from dataclasses import dataclass, field
from typing import Any

DECLARATION_INDENT = "    "


@dataclass(frozen=True)
class AssetDeclaration:
    """One manifest entry, keyed by its literal line."""

    line: str
    path: str

    @classmethod
    def from_path(cls, path: str) -> "AssetDeclaration":
        """Build the declaration emitted for a freshly scanned file."""
        return cls(line=f"{DECLARATION_INDENT}- {path}", path=path)

    @property
    def depth(self) -> int:
        """Number of path separators in the declaration line."""
        return self.line.count("/")


@dataclass
class DiscoveryResult:
    """Ordered declaration lines plus the identifier stem chosen for each."""

    declarations: list[str] = field(default_factory=list)
    name_map: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.declarations)


@dataclass
class MergeResult:
    """Declarations after reconciling with pubspec.yaml."""

    declarations: list[str]
    rewritten: bool = False
    preserved: list[str] = field(default_factory=list)
    removed: list[str] = field(default_factory=list)


@dataclass
class CheckResult:
    """Outcome of validating a project before a run."""

    is_ok: bool
    missing_files: list[str] = field(default_factory=list)
    reason: str = ""

    def message(self) -> str:
        if self.is_ok:
            return ""
        missing = "\n".join(self.missing_files)
        return f"{self.reason} Not found:\n{missing}"


@dataclass
class RunResult:
    """Result reported back to the host after a run."""

    ok: bool
    updated_files: list[str] = field(default_factory=list)
    error_detail: str | None = None

    def message(self) -> str:
        """Single user-facing pass/fail text."""
        if not self.ok:
            return f"Failed to update asset references.\n{self.error_detail or ''}".rstrip()
        if not self.updated_files:
            return "Complete!\nNo asset files found, nothing was updated."
        files = "\n".join(f"- {f}" for f in self.updated_files)
        return f"Complete!\nAssets reference has been updated successfully.\n{files}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON host surfaces."""
        return {
            "ok": self.ok,
            "updated_files": self.updated_files,
            "error_detail": self.error_detail,
        }
