"""Generated source output."""

from .res_dart import ResDartGenerator

__all__ = ["ResDartGenerator"]
