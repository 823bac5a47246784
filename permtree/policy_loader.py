import hashlib
import os
from pathlib import Path

import yaml

from permtree.logger import log_event
from permtree.permission import Permission
from permtree.stack import PermissionTreeStack
from permtree.state import PermissionState
from permtree.tree import PermissionTree


class PolicyLoadError(Exception):
    pass


POLICY_PATH_ENV = "PERMTREE_POLICY_PATH"
DEFAULT_POLICY_PATH = "permissions.yaml"

REQUIRED_KEYS = {
    "version",
    "layers",
}

_STATE_NAMES = {
    "allow": PermissionState.ALLOW,
    "deny": PermissionState.DENY,
    "none": PermissionState.NONE,
}


def _default_policy_path():
    return os.environ.get(POLICY_PATH_ENV, DEFAULT_POLICY_PATH)


def _parse_state(scope, value):
    if isinstance(value, bool):
        return PermissionState.ALLOW if value else PermissionState.DENY
    if isinstance(value, str) and value.strip().lower() in _STATE_NAMES:
        return _STATE_NAMES[value.strip().lower()]
    raise PolicyLoadError(f"Invalid state for scope {scope!r}: {value!r}")


def build_tree(permissions):
    """Build a PermissionTree from a ``{scope: state}`` mapping, in mapping order."""
    if not isinstance(permissions, dict):
        raise PolicyLoadError("Layer permissions must be a mapping of scope to state")
    tree = PermissionTree()
    for scope, value in permissions.items():
        if not isinstance(scope, str):
            raise PolicyLoadError(f"Scope must be a string: {scope!r}")
        tree.add(Permission(scope, _parse_state(scope, value)))
    return tree


def build_stack(policy):
    layers = policy.get("layers")
    if not isinstance(layers, list):
        raise PolicyLoadError("Policy layers must be a list")

    stack = PermissionTreeStack()
    for index, layer in enumerate(layers):
        if not isinstance(layer, dict):
            raise PolicyLoadError(f"Layer {index} must be a mapping")
        name = layer.get("name")
        if not isinstance(name, str) or not name:
            raise PolicyLoadError(f"Layer {index} must have a non-empty name")
        try:
            tree = build_tree(layer.get("permissions") or {})
        except PolicyLoadError as exc:
            raise PolicyLoadError(f"Layer {name}: {exc}") from exc
        stack.push(tree)
    return stack


def load_policy(policy_path=None):
    path = Path(policy_path or _default_policy_path())
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log_event("policy_loader", f"load_failed path={path} error={exc}")
        raise PolicyLoadError(f"Failed to read policy: {exc}") from exc

    try:
        policy = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        log_event("policy_loader", f"parse_failed path={path} error={exc}")
        raise PolicyLoadError(f"Failed to parse policy YAML: {exc}") from exc

    if not isinstance(policy, dict):
        log_event("policy_loader", f"invalid_mapping path={path}")
        raise PolicyLoadError("Policy YAML must be a mapping")

    missing = sorted(REQUIRED_KEYS - set(policy.keys()))
    if missing:
        log_event("policy_loader", f"missing_keys path={path} missing={','.join(missing)}")
        raise PolicyLoadError(f"Policy missing required keys: {', '.join(missing)}")

    policy_hash = hashlib.sha256(raw.encode("utf-8")).hexdigest()
    log_event(
        "policy_loader",
        f"loaded path={path} layers={len(policy.get('layers') or [])} policy_hash={policy_hash}",
    )
    return policy, policy_hash


def load_stack(policy_path=None):
    policy, policy_hash = load_policy(policy_path)
    try:
        stack = build_stack(policy)
    except PolicyLoadError as exc:
        log_event("policy_loader", f"invalid_layers policy_hash={policy_hash} error={exc}")
        raise
    return stack, policy_hash
