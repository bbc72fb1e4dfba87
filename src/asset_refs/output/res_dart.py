"""Generator for the Dart file exposing asset paths as constants."""

import logging
from datetime import date
from pathlib import Path

from ..exclusion import PACKAGE_LINE_PATTERN, remove_excluded_sources
from ..naming import name_stem, to_identifier


class ResDartGenerator:
    """Renders ``res.dart`` with one ``static const String`` per asset."""

    DEFAULT_DIR = "lib"
    DEFAULT_FILE_NAME = "res"
    DEFAULT_CLASS_NAME = "Res"
    PACKAGES_CLASS_NAME = "Packages"
    HEADER = "/// Generated by asset-refs on {date}"

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    def output_path(self, project_path: Path | str, generate_path: str | None, file_name: str | None) -> Path:
        """``lib/[generate_path/]<file_name or res>.dart`` under the project."""
        directory = Path(project_path) / self.DEFAULT_DIR
        if generate_path:
            directory = directory / generate_path.strip("/")
        return directory / f"{file_name or self.DEFAULT_FILE_NAME}.dart"

    def class_name(self, file_name: str | None) -> str:
        if not file_name:
            return self.DEFAULT_CLASS_NAME
        return file_name[:1].upper() + file_name[1:]

    def generate(
        self,
        output_file: Path | str,
        declarations: list[str],
        name_map: dict[str, str],
        exclude_paths: list[str],
        class_name: str | None = None,
        today: date | None = None,
    ) -> Path:
        """Write the generated file, creating parent directories as needed."""
        output_file = Path(output_file)
        self.logger.info("Updating %s...", output_file.name)

        content = self.render(declarations, name_map, exclude_paths, class_name, today)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")

        self.logger.info("Asset references written to %s", output_file)
        return output_file

    def render(
        self,
        declarations: list[str],
        name_map: dict[str, str],
        exclude_paths: list[str],
        class_name: str | None = None,
        today: date | None = None,
    ) -> str:
        today = today or date.today()
        packages: list[str] = []
        constants: list[str] = []

        for line in remove_excluded_sources(declarations, exclude_paths):
            asset_path = line.strip()[2:].strip()
            match = PACKAGE_LINE_PATTERN.match(line)
            if match:
                package = match.group("package")
                if package not in packages:
                    packages.append(package)
                asset_path = asset_path.replace(f"packages/{package}/", "", 1)

            name = name_map.get(line) or name_stem(line.rsplit("/", 1)[-1].strip())
            constants.append(self._constant(to_identifier(name), asset_path))

        lines = [self.HEADER.format(date=today.strftime("%Y/%m/%d"))]
        lines.append(f"class {class_name or self.DEFAULT_CLASS_NAME} {{")
        lines.extend(sorted(constants, key=str.lower))
        lines.append("}")

        if packages:
            lines.append("")
            lines.append(f"class {self.PACKAGES_CLASS_NAME} {{")
            lines.extend(self._constant(pkg, pkg) for pkg in packages)
            lines.append("}")

        return "\n".join(lines) + "\n"

    @staticmethod
    def _constant(name: str, value: str) -> str:
        return f'  static const String {name} = "{value}";'
