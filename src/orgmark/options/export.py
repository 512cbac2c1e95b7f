#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/options/export.py
"""Export options shared by every rendering profile.

``ExportOptions`` is built once per export and read, never changed, while the
tree is transcoded. Only ``visible_only`` and ``body_only`` influence the
engine; ``extension`` and ``async_export`` are hints for the host that writes
the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orgmark.constants import DEFAULT_ASYNC_EXPORT, DEFAULT_BODY_ONLY, DEFAULT_VISIBLE_ONLY
from orgmark.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class ExportOptions(CloneFrozenMixin):
    """Configuration for one transcoding run.

    Parameters
    ----------
    body_only : bool, default False
        Export only the document body. Passed to the profile's outer
        template step.
    visible_only : bool, default False
        Skip every node whose ``invisible`` property is true, together with
        its descendants.
    extension : str or None, default None
        File-extension override for the host's output file name.
    async_export : bool, default False
        Ask the host to run the export in the background. Ignored by the
        engine.

    Examples
    --------
        >>> from orgmark.options import ExportOptions
        >>> options = ExportOptions(visible_only=True)
        >>> options.create_updated(body_only=True).body_only
        True

    """

    body_only: bool = field(
        default=DEFAULT_BODY_ONLY,
        metadata={"help": "Export only the document body", "importance": "core"},
    )
    visible_only: bool = field(
        default=DEFAULT_VISIBLE_ONLY,
        metadata={"help": "Skip content flagged as invisible", "importance": "core"},
    )
    extension: str | None = field(
        default=None,
        metadata={"help": "Output file extension override (host hint)", "importance": "advanced"},
    )
    async_export: bool = field(
        default=DEFAULT_ASYNC_EXPORT,
        metadata={"help": "Run the export in the background (host hint)", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the extension hint.

        Raises
        ------
        ValueError
            If ``extension`` is empty or contains a path separator.

        """
        if self.extension is not None:
            if not self.extension.strip(". "):
                raise ValueError("extension must not be empty")
            if "/" in self.extension or "\\" in self.extension:
                raise ValueError(f"extension must not contain a path separator, got {self.extension!r}")
