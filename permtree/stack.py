"""Ordered composition of permission trees."""

from __future__ import annotations

from permtree.scope import PermissionScope
from permtree.state import PermissionState
from permtree.tree import PermissionTree


class PermissionTreeStack:
    """Trees pushed LIFO, but evaluated in push order.

    ``evaluate`` consults the first pushed tree first and returns the first
    decision other than NONE. Trees are held by reference.
    """

    def __init__(self, *trees: PermissionTree) -> None:
        self._trees: list[PermissionTree] = []
        self.push(*trees)

    def push(self, *trees: PermissionTree) -> None:
        self._trees.extend(trees)

    def pop(self) -> PermissionTree | None:
        if not self._trees:
            return None
        return self._trees.pop()

    def peek(self) -> PermissionTree | None:
        if not self._trees:
            return None
        return self._trees[-1]

    def __len__(self) -> int:
        return len(self._trees)

    def evaluate(self, scope: str | PermissionScope) -> PermissionState:
        if isinstance(scope, str):
            scope = PermissionScope(scope)
        for tree in self._trees:
            state = tree.evaluate(scope)
            if state != PermissionState.NONE:
                return state
        return PermissionState.NONE
