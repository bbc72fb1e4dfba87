"""Exclude-path filtering for asset declarations."""

import re
from collections.abc import Iterable

PACKAGE_LINE_PATTERN = re.compile(r"^ {2,}- packages/(?P<package>[a-z_][a-z0-9_]*)/")


def is_excluded(line: str, exclude_paths: Iterable[str]) -> bool:
    """Plain substring match: ``font`` also matches ``fontawesome/``."""
    return any(path in line for path in exclude_paths)


def is_package_reference(line: str) -> bool:
    return PACKAGE_LINE_PATTERN.match(line) is not None


def remove_excluded(declarations: list[str], exclude_paths: Iterable[str]) -> list[str]:
    """Drop every declaration containing any exclude substring."""
    exclude_paths = [p for p in exclude_paths if p]
    if not exclude_paths:
        return list(declarations)
    return [line for line in declarations if not is_excluded(line, exclude_paths)]


def remove_excluded_sources(declarations: list[str], exclude_paths: Iterable[str]) -> list[str]:
    """Like remove_excluded, but package references always survive."""
    exclude_paths = [p for p in exclude_paths if p]
    return [
        line for line in declarations
        if is_package_reference(line) or not is_excluded(line, exclude_paths)
    ]
