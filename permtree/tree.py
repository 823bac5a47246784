"""Trie of permissions keyed by scope tier."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Union

from permtree.permission import Permission
from permtree.scope import PermissionScope
from permtree.state import PermissionState

TreeNode = Union[dict[str, Any], Permission]


class PermissionTree:
    FULL_ACCESS: "PermissionTree"

    def __init__(self, *permissions: Permission) -> None:
        self._tree: dict[str, TreeNode] = {}
        self.add(*permissions)

    def add(self, *permissions: Permission) -> None:
        """Store each permission at the end of its scope path.

        The final tier is overwritten. An intermediate tier that holds a
        Permission is replaced by an empty branch, dropping that Permission.
        """
        for permission in permissions:
            tiers = permission.scope.to_list()
            branch = self._tree
            for i, tier in enumerate(tiers):
                if i == len(tiers) - 1:
                    branch[tier] = permission
                    break
                child = branch.get(tier)
                if not isinstance(child, dict):
                    child = {}
                    branch[tier] = child
                branch = child

    def evaluate(self, scope: str | PermissionScope) -> PermissionState:
        if isinstance(scope, str):
            scope = PermissionScope(scope)

        matching: list[TreeNode] = [self._tree]
        for tier in scope:
            next_matching: list[TreeNode] = []
            for node in matching:
                if isinstance(node, Permission):
                    # Only a trailing wildcard reaches deeper than its own length.
                    if node.scope.pop_tier() == PermissionScope.WILDCARD:
                        next_matching.append(node)
                    continue
                for key in (tier, PermissionScope.WILDCARD):
                    child = node.get(key)
                    if child is not None:
                        next_matching.append(child)
            matching = next_matching

        permissions = [node for node in matching if isinstance(node, Permission)]
        permissions.sort(key=cmp_to_key(lambda a, b: a.compare(b)))
        for permission in permissions:
            if permission.state != PermissionState.NONE:
                return permission.state
        return PermissionState.NONE

    def to_dict(self) -> dict[str, TreeNode]:
        """Internal nested mapping. Callers must not mutate it."""
        return self._tree

    def to_json(self) -> dict[str, Any]:
        return _json_node(self._tree)


def _json_node(node: dict[str, TreeNode]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, child in node.items():
        if isinstance(child, Permission):
            out[key] = child.to_dict()
        else:
            out[key] = _json_node(child)
    return out


PermissionTree.FULL_ACCESS = PermissionTree(Permission(PermissionScope.WILDCARD, True))
