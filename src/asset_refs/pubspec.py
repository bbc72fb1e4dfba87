"""Non-destructive update of the ``assets:`` block in pubspec.yaml.

This is a line scanner, not a YAML parser. The block starts at a line that
is exactly ``  assets:`` and runs over every following list item indented by
two or more spaces and every blank line. The first other line ends it. Lines
outside the block are written back untouched.
"""

import logging
import os
import re
import shutil
import tempfile
from pathlib import Path

from .contracts import MergeResult
from .exclusion import is_excluded, is_package_reference


class PubspecMerger:
    """Replaces the asset block with scanned declarations plus preserved entries."""

    MANIFEST_FILE = "pubspec.yaml"

    _BLOCK_START = re.compile(r"^ {2}assets:\s*$")
    _BLOCK_ITEM = re.compile(r"^ {2,}- ")

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    def merge(self, manifest_path: Path | str, fresh: list[str], exclude_paths: list[str]) -> MergeResult:
        """Rewrite the manifest and return the final declaration list.

        A missing manifest or one without an asset block is left alone and
        the fresh declarations are returned as they are.
        """
        manifest_path = Path(manifest_path)
        if not manifest_path.is_file():
            self.logger.warning("No %s found at %s, skipping manifest update", self.MANIFEST_FILE, manifest_path)
            return MergeResult(declarations=list(fresh))

        self.logger.info("Updating %s...", manifest_path.name)
        try:
            with manifest_path.open(encoding="utf-8", newline="") as f:
                content = f.read()
        except UnicodeDecodeError as e:
            self.logger.warning("%s is not valid UTF-8, leaving it unchanged: %s", manifest_path, e)
            return MergeResult(declarations=list(fresh))
        newline = "\r\n" if "\r\n" in content else "\n"

        result, output = self.rewrite(self._split_lines(content, newline), fresh, exclude_paths)
        if not result.rewritten:
            self.logger.warning("No '  assets:' block in %s, leaving it unchanged", manifest_path)
            return result

        self._write_atomic(manifest_path, newline.join(output) + newline)
        for line in result.removed:
            self.logger.debug("Removed stale declaration:%s", line)
        return result

    def rewrite(
        self, lines: list[str], fresh: list[str], exclude_paths: list[str]
    ) -> tuple[MergeResult, list[str]]:
        """Pure part of the merge: old manifest lines in, new manifest lines out."""
        fresh_lines = set(fresh)
        stale: list[str] = []
        output: list[str] = []
        result: MergeResult | None = None
        in_block = False

        for line in lines:
            if result is None and not in_block and self._BLOCK_START.match(line):
                in_block = True
                output.append(line)
                continue

            if in_block:
                if self._BLOCK_ITEM.match(line):
                    if line not in fresh_lines and line not in stale:
                        stale.append(line)
                    continue
                if not line.strip():
                    continue
                in_block = False
                result = self._close_block(fresh, stale, exclude_paths)
                output.extend(result.declarations)

            output.append(line)

        if in_block:
            result = self._close_block(fresh, stale, exclude_paths)
            output.extend(result.declarations)

        if result is None:
            return MergeResult(declarations=list(fresh)), lines
        return result, output

    def _close_block(self, fresh: list[str], stale: list[str], exclude_paths: list[str]) -> MergeResult:
        """Keep package references and excluded paths, drop every other stale line."""
        exclude_paths = [p for p in exclude_paths if p]
        preserved: list[str] = []
        removed: list[str] = []
        for line in stale:
            if is_package_reference(line) or is_excluded(line, exclude_paths):
                preserved.append(line)
            else:
                removed.append(line)

        declarations = sorted([*fresh, *preserved], key=str.lower)
        return MergeResult(declarations=declarations, rewritten=True, preserved=preserved, removed=removed)

    @staticmethod
    def _split_lines(content: str, newline: str) -> list[str]:
        lines = content.split(newline)
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def _write_atomic(self, path: Path, content: str) -> None:
        """Write to a sibling temp file, then move it over the manifest."""
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            shutil.copymode(path, tmp_name)
            os.replace(tmp_name, path)
        except OSError as e:
            self.logger.error("Failed to write %s: %s", path, e)
            Path(tmp_name).unlink(missing_ok=True)
            raise
