"""Splits config names into lowercase word tokens."""

from __future__ import annotations

import re
from typing import List

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def tokenize_config_name(config_name: str) -> List[str]:
    """Return the lowercase words of a config name (`reactNative-strict` -> react, native, strict)."""
    normalized = _CAMEL_BOUNDARY.sub(r"\1 \2", config_name)
    normalized = _NON_ALNUM.sub(" ", normalized).lower().strip()
    if not normalized:
        return []
    return normalized.split()


__all__ = ["tokenize_config_name"]
