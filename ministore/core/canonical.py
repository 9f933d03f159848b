"""
Canonical serialization for state inspection and hashing.

Two equal states always serialize to the same bytes, whatever the
insertion order of their mappings.
"""

import dataclasses
import hashlib
import json
from collections.abc import Mapping
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested state to canonical form.

    Rules:
    - mapping keys sorted (as strings)
    - dataclass instances converted to dicts
    - tuples and lists converted to lists
    - recursive normalization
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Raises:
        TypeError: If obj holds values JSON cannot represent
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    return canonical_json_bytes(obj).decode("utf-8")


def compute_state_hash(state: Any) -> str:
    """SHA-256 hex digest of the canonical state bytes."""
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()
