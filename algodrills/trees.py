"""Binary tree traversal drill over single-letter nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from string import ascii_uppercase

_ROOT = "A"
_EMPTY = "."


def _child(label: str) -> str | None:
    if label == _EMPTY:
        return None
    if label not in ascii_uppercase or len(label) != 1:
        raise ValueError(f"invalid node label: {label!r}")
    return label


def traversals(nodes: Iterable[Sequence[str]]) -> tuple[str, str, str]:
    """Return the preorder, inorder and postorder walks of a tree rooted at ``'A'``.

    Each node is ``(parent, left, right)`` with ``'.'`` for a missing child.
    """
    children: dict[str, tuple[str | None, str | None]] = {}
    for parent, left, right in nodes:
        if parent not in ascii_uppercase or len(parent) != 1:
            raise ValueError(f"invalid node label: {parent!r}")
        children[parent] = (_child(left), _child(right))

    def kids(label: str) -> tuple[str | None, str | None]:
        return children.get(label, (None, None))

    def preorder(label: str | None) -> Iterator[str]:
        if label is None:
            return
        left, right = kids(label)
        yield label
        yield from preorder(left)
        yield from preorder(right)

    def inorder(label: str | None) -> Iterator[str]:
        if label is None:
            return
        left, right = kids(label)
        yield from inorder(left)
        yield label
        yield from inorder(right)

    def postorder(label: str | None) -> Iterator[str]:
        if label is None:
            return
        left, right = kids(label)
        yield from postorder(left)
        yield from postorder(right)
        yield label

    return (
        "".join(preorder(_ROOT)),
        "".join(inorder(_ROOT)),
        "".join(postorder(_ROOT)),
    )