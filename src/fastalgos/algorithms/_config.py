"""Validation of the `config` dict taken by every `sort(a, *, config=None)` adapter."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

COMMON_KEYS = frozenset({"order"})


def check_config(
    name: str, config: Optional[Dict[str, Any]], extra_keys: Iterable[str] = ()
) -> Dict[str, Any]:
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{name}: config must be a dict or None; got {type(config).__name__}")
    allowed = COMMON_KEYS | set(extra_keys)
    unknown = sorted(set(config) - allowed)
    if unknown:
        raise ValueError(f"{name}: unknown config keys {unknown}; allowed: {sorted(allowed)}")
    return config
