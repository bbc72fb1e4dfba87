"""Recursive asset discovery with density variant resolution."""

import logging
import re
from pathlib import Path

from .contracts import AssetDeclaration, DiscoveryResult
from .naming import disambiguated_stem, name_stem


class AssetScanner:
    """Walks asset root directories and builds the declaration list.

    Files in a directory are handled before its subdirectories so that the
    base asset is registered before any ``2.0x``-style variant of it. A file
    name that reappears deeper in the tree is treated as a variant and
    dropped; one that reappears at the same depth or shallower is a distinct
    asset and gets a path-prefixed identifier.
    """

    ASSET_DIRS: tuple[str, ...] = ("asset", "assets", "images")
    SKIP_FILES: set[str] = {".DS_Store"}
    DENSITY_DIR_PATTERN = re.compile(r"^[1-9](\.\d)?x$")

    def __init__(self, project_path: Path | str) -> None:
        self.project_path = Path(project_path)
        self.logger = logging.getLogger(self.__class__.__name__)

    def scan(self, asset_dirs: tuple[str, ...] | list[str] | None = None) -> DiscoveryResult:
        """Scan each asset root in order. Missing roots contribute nothing."""
        asset_dirs = self.ASSET_DIRS if asset_dirs is None else tuple(asset_dirs)
        self.logger.info("Scanning asset files under %s", ", ".join(asset_dirs))

        result = DiscoveryResult()
        seen: dict[str, AssetDeclaration] = {}
        for name in asset_dirs:
            self._scan_dir(result, seen, self.project_path / name, name, False)

        self.logger.info("Discovered %d asset declarations", len(result))
        return result

    def is_density_dir(self, name: str) -> bool:
        return bool(self.DENSITY_DIR_PATTERN.match(name))

    def _scan_dir(
        self,
        result: DiscoveryResult,
        seen: dict[str, AssetDeclaration],
        directory: Path,
        prefix: str,
        in_density_dir: bool,
    ) -> None:
        """Register files at this level, then recurse into subdirectories."""
        if not directory.is_dir():
            return

        for is_dir, entry in self._list_entries(directory):
            if not is_dir:
                self._add_file(result, seen, entry.name, prefix, in_density_dir)
            elif self.is_density_dir(entry.name):
                self._scan_dir(result, seen, entry, prefix, True)
            else:
                self._scan_dir(result, seen, entry, f"{prefix}/{entry.name}", False)

    def _list_entries(self, directory: Path) -> list[tuple[bool, Path]]:
        """``(is_dir, path)`` pairs, files first, each group by name."""
        try:
            entries = [e for e in directory.iterdir() if e.name not in self.SKIP_FILES]
        except PermissionError as e:
            self.logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return []

        listed: list[tuple[bool, Path]] = []
        for entry in entries:
            if entry.is_dir():
                listed.append((True, entry))
            elif entry.is_file():
                listed.append((False, entry))
        return sorted(listed, key=lambda item: (item[0], item[1].name))

    def _add_file(
        self,
        result: DiscoveryResult,
        seen: dict[str, AssetDeclaration],
        file_name: str,
        prefix: str,
        in_density_dir: bool,
    ) -> None:
        declaration = AssetDeclaration.from_path(f"{prefix}/{file_name}")
        stem = name_stem(file_name)

        existing = seen.get(file_name)
        if existing is None:
            seen[file_name] = declaration
            result.name_map[declaration.line] = stem
        else:
            depth = declaration.depth + 1 if in_density_dir else declaration.depth
            if depth > existing.depth:
                self.logger.debug("Variant of %s dropped: %s", existing.path, declaration.path)
                return
            result.name_map[declaration.line] = disambiguated_stem(prefix, stem)

        result.declarations.append(declaration.line)
        self.logger.debug("%s", declaration.line)
