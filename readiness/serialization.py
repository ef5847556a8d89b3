"""
Conversion of engine results into JSON-compatible payloads.

Keys are camelCased for the presentation layer, enums become their values,
tuples become lists and enum-keyed mappings are keyed by the enum value.
"""
import dataclasses
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        key = key.value
    return to_camel(str(key))


def to_payload(obj: Any) -> Any:
    """Recursively convert results, records and containers to native JSON types."""
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (str, int, float, bool)):
        return obj
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, BaseModel):
        return {_key(k): to_payload(v) for k, v in obj.model_dump(exclude_none=True).items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            _key(f.name): to_payload(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, dict) or hasattr(obj, 'items'):
        return {_key(k): to_payload(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set, frozenset)):
        return [to_payload(item) for item in obj]
    return obj
