#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/utils/footnotes.py
"""Footnote numbering and deferred definition rendering for one export."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

from orgmark.ast.nodes import Node, NodeKind
from orgmark.exceptions import TranscodeError


@dataclass
class FootnoteRegistry:
    """Assign sequential footnote ids and store their rendered definitions.

    A registry is created for a single transcoding run and discarded with it.
    Ids start at 1 and follow the order in which labels are first referenced
    while walking the tree, independent of where the definitions live.

    Parameters
    ----------
    definitions : Mapping[str, Sequence[Node]]
        Raw definition bodies keyed by footnote label

    Examples
    --------
        >>> registry = FootnoteRegistry({"a": (), "b": ()})
        >>> registry.reference("b", lambda body: "second")
        1
        >>> registry.reference("a", lambda body: "first")
        2
        >>> registry.reference("b", lambda body: "ignored")
        1
        >>> registry.entries()
        [(1, 'second'), (2, 'first')]

    """

    definitions: Mapping[str, Sequence[Node]] = field(default_factory=dict)
    _ids: Dict[str, int] = field(default_factory=dict, init=False, repr=False)
    _rendered: Dict[int, str] = field(default_factory=dict, init=False, repr=False)

    def reference(self, label: str, render: Callable[[Sequence[Node]], str]) -> int:
        """Return the id for ``label``, assigning one on first reference.

        The id is reserved before the body is rendered, so footnotes
        referenced from inside this definition are numbered after it.

        Parameters
        ----------
        label : str
            Footnote label
        render : callable
            Renders a definition body to a fragment; called once per label

        Raises
        ------
        TranscodeError
            If no definition exists for ``label``

        """
        if label in self._ids:
            return self._ids[label]
        if label not in self.definitions:
            raise TranscodeError(f"Undefined footnote label: {label}", node_kind=NodeKind.FOOTNOTE_REFERENCE.value)

        footnote_id = len(self._ids) + 1
        self._ids[label] = footnote_id
        self._rendered[footnote_id] = render(self.definitions[label])
        return footnote_id

    def entries(self) -> List[Tuple[int, str]]:
        """Return ``(id, rendered definition)`` pairs in ascending id order."""
        return sorted(self._rendered.items())

    def __len__(self) -> int:
        return len(self._ids)

    def __bool__(self) -> bool:
        return bool(self._ids)
