from __future__ import annotations

from permtree.scope import PermissionScope


class AccessDeniedError(Exception):
    """Raised when a required scope does not evaluate to ALLOW."""

    def __init__(self, scope: str | PermissionScope | None = None) -> None:
        self.scope = scope
        if scope is None or scope == "":
            super().__init__("Missing required permissions")
        else:
            super().__init__(f"Missing required permission for scope {scope}")
