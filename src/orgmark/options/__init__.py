#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/options/__init__.py
"""Option dataclasses for orgmark exports."""

from orgmark.options.base import CloneFrozenMixin
from orgmark.options.export import ExportOptions

__all__ = ["CloneFrozenMixin", "ExportOptions"]
