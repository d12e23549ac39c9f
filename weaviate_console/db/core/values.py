"""
Normalization of record values returned by the typed client.

Every value leaving the data-access layer belongs to the closed set described
by ``Value``, so renderers and sort-eligibility checks can dispatch on the
Python type alone.
"""

import base64
import dataclasses
import uuid
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Mapping, Union

Value = Union[None, bool, int, float, str, datetime, List["Value"], Dict[str, "Value"]]


def normalize_value(value: Any) -> Value:
    """
    Convert a property value into the closed Value set.

    - UUIDs become strings
    - plain dates become midnight UTC datetimes
    - bytes (blobs) become base64 text
    - dataclasses (geo coordinates, phone numbers) and mappings become dicts
    - any other sequence becomes a list
    - anything else falls back to its string form
    """
    if value is None or isinstance(value, (bool, int, float, str, datetime)):
        return value
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: normalize_value(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {str(k): normalize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize_value(v) for v in value]
    if hasattr(value, "model_dump"):
        return normalize_value(value.model_dump())
    return str(value)


def normalize_properties(properties: Mapping[str, Any]) -> Dict[str, Value]:
    return {str(name): normalize_value(v) for name, v in (properties or {}).items()}
