import dataclasses
import logging
import math
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive values.

    Python's round() uses banker's rounding (round(2.5) == 2); scores are
    rounded the conventional way so 84.5 becomes 85.
    """
    return int(math.floor(float(value) + 0.5))


def clamp_score(value: float, lo: float = 0.0, hi: float = 100.0) -> float:
    """Clamp a score into [lo, hi], logging when a correction happens."""
    clamped = max(lo, min(hi, float(value)))
    if clamped != value:
        logger.debug(f"Score {value} clamped to {clamped}")
    return clamped


def freeze_mapping(obj: Any) -> Any:
    """Recursively wrap mappings in read-only views and lists in tuples."""
    if isinstance(obj, Mapping):
        return MappingProxyType({k: freeze_mapping(v) for k, v in obj.items()})
    if isinstance(obj, list):
        return tuple(freeze_mapping(item) for item in obj)
    return obj


def to_native_types(obj: Any) -> Any:
    """Recursively convert numpy values, dataclasses, read-only mappings and tuples
    to native Python types for JSON serialization."""
    if obj is None:
        return None
    if hasattr(obj, 'tolist'):  # numpy array (check before scalars)
        return obj.tolist()
    if hasattr(obj, 'item'):  # numpy scalar
        return obj.item()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_native_types(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return {k: to_native_types(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_native_types(item) for item in obj]
    return obj
