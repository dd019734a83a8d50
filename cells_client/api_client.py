"""
Client-side type conversion for Cells REST payloads.

``convert_to_type`` coerces one untyped JSON value into the type named by a
type tag. Models describe their fields with these tags (see
``core.dto.BaseDTO``), so this module is the only place that knows how a
JSON value becomes a Python value.

Supported type tags:
- "String", "Integer", "Number", "Boolean", "Date", "Blob", "Object"
- the Python types str, int, float, bool, datetime, bytes, object
- a model class (anything with ``construct_from_object``) or an ``Enum``
- the registered name of a model or enum
- ``[T]`` for sequences and ``{"String": T}`` for string-keyed maps

Conversion is total: values that cannot be coerced are returned unchanged.
"""

from __future__ import annotations

import base64
from datetime import date, datetime, timezone
from enum import Enum
import math
import re
from typing import Any, Dict, Mapping, Optional

from .core.errors import UnknownModelError
from .core.logging import get_logger


logger = get_logger("cells.api_client")


PRIMITIVE_TYPES = ("String", "Integer", "Number", "Boolean", "Date", "Blob", "Object")

_PYTHON_TYPES = {
    str: "String",
    int: "Integer",
    float: "Number",
    bool: "Boolean",
    datetime: "Date",
    bytes: "Blob",
    object: "Object",
}

_BOOLEAN_STRINGS = {"true": True, "false": False, "1": True, "0": False}

# Floats at or above this magnitude are rendered in exponent form.
_EXPONENT_THRESHOLD = 1e21
_EXPONENT_RE = re.compile(r"e([+-])0*(\d)")
_FRACTION_RE = re.compile(r"(:\d{2}\.)(\d+)")

_models: Dict[str, type] = {}


# Registry


def register_model(cls: type, replace: bool = False) -> type:
    """
    Register a model or enum class under its class name.

    Usable as a class decorator. An existing registration is kept unless
    ``replace`` is true.
    """

    name = cls.__name__
    if name in _models and not replace:
        logger.debug("Model %s already registered, keeping existing class", name)
        return cls
    _models[name] = cls
    return cls


def unregister_model(name: str) -> None:
    _models.pop(name, None)


def get_model(name: str) -> type:
    """
    Return the class registered under ``name``.

    Raises:
        UnknownModelError: If nothing is registered under that name.
    """

    try:
        return _models[name]
    except KeyError:
        raise UnknownModelError(f"No model registered under {name!r}") from None


def registered_models() -> Dict[str, type]:
    return dict(sorted(_models.items()))


# Scalars


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse an ISO-8601 string or epoch seconds into a ``datetime``.

    Both "T" and space separators are accepted, as is a trailing "Z".
    Fractional seconds may have any number of digits; they are truncated
    to microseconds.
    Returns None when the value cannot be interpreted as a date.
    """

    if isinstance(value, datetime):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 only takes 3 or 6 fraction digits
    text = _FRACTION_RE.sub(lambda m: m.group(1) + m.group(2)[:6].ljust(6, "0"), text, count=1)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _to_boolean(data: Any) -> Any:
    if isinstance(data, bool):
        return data
    if isinstance(data, (int, float)):
        return bool(data)
    if isinstance(data, str) and data.strip().lower() in _BOOLEAN_STRINGS:
        return _BOOLEAN_STRINGS[data.strip().lower()]
    return data


def _to_integer(data: Any) -> Any:
    if isinstance(data, bool):
        return data
    if isinstance(data, int):
        return data
    if isinstance(data, float):
        # Truncates like parseInt; NaN and infinities have no integer form.
        return int(data) if math.isfinite(data) else data
    if isinstance(data, str):
        return int(data.strip(), 10)
    return data


def _to_number(data: Any) -> Any:
    if isinstance(data, bool):
        return data
    if isinstance(data, (int, float)):
        return data
    if isinstance(data, str):
        return float(data.strip())
    return data


def _to_string(data: Any) -> Any:
    if isinstance(data, str):
        return data
    if isinstance(data, bool):
        return "true" if data else "false"
    if isinstance(data, int):
        return str(data)
    if isinstance(data, float):
        if math.isnan(data):
            return "NaN"
        if math.isinf(data):
            return "Infinity" if data > 0 else "-Infinity"
        if data.is_integer() and abs(data) < _EXPONENT_THRESHOLD:
            return str(int(data))
        # exponent without leading zeros: 1e-7, not 1e-07
        return _EXPONENT_RE.sub(lambda m: "e" + m.group(1) + m.group(2), repr(data))
    return data


def _to_date(data: Any) -> Any:
    parsed = parse_date(data)
    return data if parsed is None else parsed


def _to_enum(data: Any, enum_type: type) -> Any:
    if isinstance(data, enum_type):
        return data
    try:
        return enum_type(data)
    except ValueError:
        logger.debug("Value %r is not a member of %s", data, enum_type.__name__)
        return data


_SCALAR_CONVERTERS = {
    "String": _to_string,
    "Integer": _to_integer,
    "Number": _to_number,
    "Boolean": _to_boolean,
    "Date": _to_date,
}


# Conversion


def convert_to_type(data: Any, type_: Any) -> Any:
    """
    Convert ``data`` to the type described by ``type_``.

    None stays None. Values that do not fit the requested type are returned
    as they are.
    """

    if data is None:
        return None

    if isinstance(type_, type) and type_ in _PYTHON_TYPES:
        type_ = _PYTHON_TYPES[type_]

    if isinstance(type_, str):
        if type_ in _SCALAR_CONVERTERS:
            try:
                return _SCALAR_CONVERTERS[type_](data)
            except (TypeError, ValueError):
                logger.debug("Could not convert %r to %s, keeping value", data, type_)
                return data
        if type_ in ("Blob", "Object"):
            return data
        model = _models.get(type_)
        if model is None:
            logger.warning("Unknown type %r, value passed through unchanged", type_)
            return data
        type_ = model

    if isinstance(type_, list):
        if not type_ or not isinstance(data, (list, tuple)):
            return data
        item_type = type_[0]
        return [convert_to_type(item, item_type) for item in data]

    if isinstance(type_, dict):
        if not type_ or not isinstance(data, Mapping):
            return data
        key_type, value_type = next(iter(type_.items()))
        return {
            convert_to_type(key, key_type): convert_to_type(value, value_type)
            for key, value in data.items()
        }

    if isinstance(type_, type) and issubclass(type_, Enum):
        return _to_enum(data, type_)

    construct = getattr(type_, "construct_from_object", None)
    if construct is not None:
        return construct(data)

    return data


def sanitize_for_serialization(value: Any) -> Any:
    """
    Render a converted value back into plain JSON-compatible data.
    """

    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    to_dict = getattr(value, "to_dict", None)
    if to_dict is not None:
        return to_dict()
    if isinstance(value, (list, tuple)):
        return [sanitize_for_serialization(item) for item in value]
    if isinstance(value, Mapping):
        return {key: sanitize_for_serialization(item) for key, item in value.items()}
    return value
