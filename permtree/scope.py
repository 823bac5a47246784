"""Tiered permission scopes such as ``glimpse:users:read``.

A scope is an ordered list of tiers separated by ``:``. A tier that is exactly
``*`` is a wildcard. Scopes are plain values: nothing in this module performs
I/O or raises for string input.
"""

from __future__ import annotations

import math
from typing import Iterator


class PermissionScope:
    SEPARATOR = ":"
    WILDCARD = "*"

    def __init__(self, scope: str | None = None) -> None:
        if scope:
            self._tiers = scope.split(self.SEPARATOR)
        else:
            self._tiers = []
        self._wildcard_count = sum(1 for tier in self._tiers if tier == self.WILDCARD)

    @classmethod
    def parse(cls, text: str | None) -> "PermissionScope":
        return cls(text)

    def copy(self) -> "PermissionScope":
        duplicate = PermissionScope()
        duplicate.push_tier(self)
        return duplicate

    def to_list(self) -> list[str]:
        return list(self._tiers)

    def at(self, depth: float) -> str | None:
        """Return the tier at ``depth``, counting from the end when negative.

        Fractional depths are floored. Out of range depths return None.
        """
        if math.isnan(depth) or math.isinf(depth):
            return None
        depth = math.floor(depth)
        index = depth if depth >= 0 else len(self._tiers) + depth
        if index < 0 or index >= len(self._tiers):
            return None
        return self._tiers[index]

    @property
    def size(self) -> int:
        return len(self._tiers)

    @property
    def wildcard_count(self) -> int:
        return self._wildcard_count

    def __len__(self) -> int:
        return len(self._tiers)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tiers))

    def __str__(self) -> str:
        return self.SEPARATOR.join(self._tiers)

    def __repr__(self) -> str:
        return f"PermissionScope({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PermissionScope):
            return NotImplemented
        return self._tiers == other._tiers

    def __hash__(self) -> int:
        # Scopes are mutable; do not mutate one while it is a dict key or set member.
        return hash(tuple(self._tiers))

    def push_tier(self, tier: "str | PermissionScope") -> None:
        if isinstance(tier, PermissionScope):
            new_tiers = tier.to_list()
        else:
            new_tiers = tier.split(self.SEPARATOR)
        self._wildcard_count += sum(1 for t in new_tiers if t == self.WILDCARD)
        self._tiers.extend(new_tiers)

    def pop_tier(self) -> str | None:
        if not self._tiers:
            return None
        popped = self._tiers.pop()
        if popped == self.WILDCARD:
            self._wildcard_count -= 1
        return popped

    def includes(self, other: "str | PermissionScope") -> bool:
        """Return True when this scope, used as a pattern, covers ``other``.

        A wildcard in the last tier covers that tier and anything deeper. Any
        other wildcard stands in for exactly one tier.
        """
        if isinstance(other, str):
            other = PermissionScope(other)

        if len(self._tiers) > len(other._tiers):
            return False

        last = len(self._tiers) - 1
        for i, other_tier in enumerate(other._tiers):
            own_tier = self._tiers[i] if i <= last else None
            if own_tier == self.WILDCARD:
                if i == last:
                    return True
                continue
            if own_tier != other_tier:
                return False
        return True

    def compare(self, other: "PermissionScope") -> int:
        """Priority order: negative when this scope should be applied first.

        More tiers come first, then fewer wildcards. Anything else is a tie.
        """
        if len(self._tiers) != len(other._tiers):
            return len(other._tiers) - len(self._tiers)
        if self._wildcard_count != other._wildcard_count:
            return self._wildcard_count - other._wildcard_count
        return 0
