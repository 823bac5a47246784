"""Three-valued permission decision."""

from __future__ import annotations

from enum import IntEnum


class PermissionState(IntEnum):
    """Outcome of evaluating a scope.

    The numeric value is only used for ordering: a larger value wins a tie
    between two permissions with equally specific scopes.
    """

    NONE = -1
    ALLOW = 0
    DENY = 1
