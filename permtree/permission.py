"""A scope pattern paired with an allow/deny decision."""

from __future__ import annotations

from typing import Any

from permtree.scope import PermissionScope
from permtree.state import PermissionState


class Permission:
    def __init__(self, scope: str | PermissionScope, state: bool | PermissionState) -> None:
        if isinstance(scope, PermissionScope):
            self._scope = scope.copy()
        else:
            self._scope = PermissionScope(scope)

        if isinstance(state, bool):
            self._state = PermissionState.ALLOW if state else PermissionState.DENY
        else:
            self._state = PermissionState(state)

    @property
    def scope(self) -> PermissionScope:
        return self._scope.copy()

    @property
    def state(self) -> PermissionState:
        return self._state

    def compare(self, other: "Permission") -> int:
        """Priority order: negative when this permission should be applied first.

        Scope specificity decides first. On a tie DENY beats ALLOW beats NONE.
        """
        scope_compare = self._scope.compare(other._scope)
        if scope_compare != 0:
            return scope_compare
        if self._state != other._state:
            return int(other._state) - int(self._state)
        return 0

    def to_dict(self) -> dict[str, Any]:
        return {"scope": str(self._scope), "state": int(self._state)}

    def __str__(self) -> str:
        return f"{self._scope} = {int(self._state)}"

    def __repr__(self) -> str:
        return f"Permission({str(self._scope)!r}, {self._state!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self._scope == other._scope and self._state == other._state

    def __hash__(self) -> int:
        return hash((str(self._scope), self._state))
