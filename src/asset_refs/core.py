"""Orchestrates scan, exclusion, pubspec merge and res.dart generation."""

import logging
from datetime import date
from pathlib import Path

from .checker import ProjectChecker
from .config import AssetConfig
from .contracts import RunResult
from .exclusion import remove_excluded
from .output.res_dart import ResDartGenerator
from .pubspec import PubspecMerger
from .scanner import AssetScanner


class AssetRefGenerator:
    """Runs the full pipeline for one project.

    Each call to run() builds its own scan state, so one instance can be
    reused across runs and projects.
    """

    def __init__(
        self,
        checker: ProjectChecker | None = None,
        merger: PubspecMerger | None = None,
        generator: ResDartGenerator | None = None,
    ) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)
        self.checker = checker or ProjectChecker()
        self.merger = merger or PubspecMerger()
        self.generator = generator or ResDartGenerator()

    def run(self, project_path: Path | str, config: AssetConfig | None = None, today: date | None = None) -> RunResult:
        """Update pubspec.yaml and the generated Dart file.

        Returns a failed RunResult instead of raising for pre-flight problems
        and file I/O errors.
        """
        project_path = Path(project_path)
        config = config or AssetConfig()

        check = self.checker.check(project_path)
        if not check.is_ok:
            self.logger.warning("Pre-flight check failed for %s: %s", project_path, check.missing_files)
            return RunResult(ok=False, error_detail=check.message())

        scan = AssetScanner(project_path).scan(self.checker.asset_dirs)
        if not scan.declarations:
            self.logger.info("No asset files found under %s", project_path)
            return RunResult(ok=True)

        fresh = remove_excluded(scan.declarations, config.exclude_path)
        updated: list[str] = []

        try:
            manifest = project_path / PubspecMerger.MANIFEST_FILE
            merged = self.merger.merge(manifest, fresh, config.exclude_path)
            if merged.rewritten:
                updated.append(str(manifest))

            output_file = self.generator.output_path(
                project_path, config.generate_path, config.generate_file_name
            )
            self.generator.generate(
                output_file,
                merged.declarations,
                scan.name_map,
                config.exclude_path,
                class_name=self.generator.class_name(config.generate_file_name),
                today=today,
            )
            updated.append(str(output_file))
        except OSError as e:
            self.logger.error("Asset reference update failed: %s", e)
            return RunResult(ok=False, updated_files=updated, error_detail=str(e))

        self.logger.info("Flutter assets reference has been updated")
        return RunResult(ok=True, updated_files=updated)


def run(project_path: Path | str, config: AssetConfig | None = None) -> RunResult:
    """Run the pipeline with the default collaborators."""
    return AssetRefGenerator().run(project_path, config)
