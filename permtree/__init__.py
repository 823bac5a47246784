"""Scope-based permission evaluation.

Pure, synchronous building blocks: scopes, permissions, permission trees and
tree stacks. Only the policy loader and the logger touch the filesystem.
"""

from permtree.errors import AccessDeniedError
from permtree.permission import Permission
from permtree.policy_loader import (
    PolicyLoadError,
    build_stack,
    build_tree,
    load_policy,
    load_stack,
)
from permtree.scope import PermissionScope
from permtree.stack import PermissionTreeStack
from permtree.state import PermissionState
from permtree.tools import (
    assert_permission,
    format_scope,
    global_stack,
    reset_global_stack,
)
from permtree.tree import PermissionTree

__all__ = [
    "AccessDeniedError",
    "Permission",
    "PermissionScope",
    "PermissionState",
    "PermissionTree",
    "PermissionTreeStack",
    "PolicyLoadError",
    "assert_permission",
    "build_stack",
    "build_tree",
    "format_scope",
    "global_stack",
    "load_policy",
    "load_stack",
    "reset_global_stack",
]
