"""Flutter asset reference generator - keep pubspec.yaml and res.dart in sync with asset folders."""

from .config import AssetConfig
from .contracts import AssetDeclaration, CheckResult, DiscoveryResult, MergeResult, RunResult
from .core import AssetRefGenerator, run

__all__ = [
    "AssetConfig",
    "AssetDeclaration",
    "AssetRefGenerator",
    "CheckResult",
    "DiscoveryResult",
    "MergeResult",
    "RunResult",
    "run",
]
