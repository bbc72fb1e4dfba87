"""Pre-flight validation of a project before scanning."""

from pathlib import Path

from .contracts import CheckResult
from .scanner import AssetScanner


class ProjectChecker:
    """Checks that the project root exists and has at least one asset root."""

    def __init__(self, asset_dirs: tuple[str, ...] = AssetScanner.ASSET_DIRS) -> None:
        self.asset_dirs = asset_dirs

    def check(self, project_path: Path | str) -> CheckResult:
        project_path = Path(project_path)
        if not project_path.is_dir():
            return CheckResult(
                is_ok=False,
                missing_files=[str(project_path)],
                reason="Project directory does not exist.",
            )

        if not self.existing_asset_dirs(project_path):
            return CheckResult(
                is_ok=False,
                missing_files=list(self.asset_dirs),
                reason=f"No asset directory named {', '.join(self.asset_dirs)} was found.",
            )

        return CheckResult(is_ok=True)

    def existing_asset_dirs(self, project_path: Path) -> list[str]:
        return [name for name in self.asset_dirs if (project_path / name).is_dir()]
