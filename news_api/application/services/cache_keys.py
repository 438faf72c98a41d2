"""Deterministic cache keys for query-parameter sets."""

import hashlib
import json
from collections.abc import Mapping
from typing import Any


def generate_key(prefix: str, params: Mapping[str, Any]) -> str:
    """Build a canonical cache key for ``params`` under ``prefix``.

    Parameters set to ``None`` are dropped, so ``{"page": 1, "search": None}``
    and ``{"page": 1}`` share a key. Names are sorted before serializing and
    JSON keeps value types apart (``1`` and ``"1"`` give different keys).
    The serialized form is hashed so keys stay short however many filters
    a query carries.
    """
    present = {name: value for name, value in params.items() if value is not None}
    canonical = json.dumps(present, sort_keys=True, separators=(",", ":"), default=str)
    digest = hashlib.sha256(canonical.encode("utf-8")).hexdigest()
    return f"{prefix}{digest}"
