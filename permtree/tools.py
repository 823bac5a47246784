"""Caller-side helpers: placeholder formatting and permission assertions."""

from __future__ import annotations

import re
from typing import Any

from permtree.errors import AccessDeniedError
from permtree.logger import log_event
from permtree.scope import PermissionScope
from permtree.stack import PermissionTreeStack
from permtree.state import PermissionState
from permtree.tree import PermissionTree

_PLACEHOLDER = re.compile(r"\$([1-9])")

global_stack = PermissionTreeStack()


def reset_global_stack(*trees: PermissionTree) -> None:
    while global_stack.pop() is not None:
        pass
    global_stack.push(*trees)


def format_scope(scope: str | PermissionScope, *values: Any) -> str | PermissionScope:
    """Replace ``$1``..``$9`` with the matching positional value.

    Placeholders without a value are left as is and extra values are ignored.
    A PermissionScope in gives a PermissionScope out.
    """
    text = str(scope)

    def _substitute(match: re.Match) -> str:
        index = int(match.group(1)) - 1
        if index < len(values):
            return str(values[index])
        return match.group(0)

    formatted = _PLACEHOLDER.sub(_substitute, text)
    if isinstance(scope, PermissionScope):
        return PermissionScope(formatted)
    return formatted


def assert_permission(
    scope: str | PermissionScope,
    *values: Any,
    stack: PermissionTreeStack | None = None,
) -> None:
    if stack is None:
        stack = global_stack
    scope = format_scope(scope, *values)
    state = stack.evaluate(scope)
    if state != PermissionState.ALLOW:
        log_event("assert_permission", f"denied scope={scope} state={state.name}")
        raise AccessDeniedError(scope)
