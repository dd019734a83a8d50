"""
Build model classes from the ``definitions`` of a Swagger 2.0 document.

Each object definition becomes a ``BaseDTO`` dataclass whose
``attribute_map`` and ``swagger_types`` are derived from its properties;
each string enum becomes a str-valued ``Enum``. References between
definitions are kept as type tag names and resolved through the model
registry at conversion time, so definitions may refer to each other in any
order.
"""

from __future__ import annotations

from dataclasses import field, make_dataclass
from enum import Enum
import json
import keyword
from pathlib import Path
import re
from typing import Any, Dict, List, Mapping, Tuple, Union

from pydantic import ValidationError

from ..api_client import register_model
from ..core.dto import UNSET, BaseDTO
from ..core.errors import SchemaError
from ..core.logging import get_logger
from .schema import SwaggerDocument, SwaggerSchema


logger = get_logger("cells.swagger.loader")

DEFINITIONS_PREFIX = "#/definitions/"

_FIRST_CAP = re.compile(r"(.)([A-Z][a-z]+)")
_ALL_CAP = re.compile(r"([a-z0-9])([A-Z])")
_NON_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]")

# Attribute names that would shadow BaseDTO members.
_RESERVED = {
    "attribute_map",
    "construct_from_object",
    "field_names",
    "from_dict",
    "is_set",
    "swagger_types",
    "to_dict",
}


def to_snake_case(name: str) -> str:
    """
    Turn a wire name such as ``PeerId`` or ``ParentID`` into a valid Python
    attribute name (``peer_id``, ``parent_id``).
    """

    text = _FIRST_CAP.sub(r"\1_\2", name)
    text = _ALL_CAP.sub(r"\1_\2", text).lower()
    text = _NON_IDENTIFIER.sub("_", text)
    if not text or text[0].isdigit():
        text = "_" + text
    if keyword.iskeyword(text) or text in _RESERVED:
        text += "_"
    return text


def _enum_member_name(value: Any) -> str:
    text = _NON_IDENTIFIER.sub("_", str(value)).upper()
    if not text or text[0].isdigit() or text.startswith("_"):
        text = "VALUE_" + text
    return text


def classify_type(schema: SwaggerSchema, path: str) -> Any:
    """
    Return the type tag for a property schema.
    """

    if schema.ref is not None:
        if not schema.ref.startswith(DEFINITIONS_PREFIX):
            raise SchemaError(f"Unsupported $ref {schema.ref!r} at {path}")
        return schema.ref[len(DEFINITIONS_PREFIX):]

    if schema.type is None:
        # Without a type any JSON value is valid.
        return "Object"

    if schema.type == "string":
        if schema.format in ("date-time", "date"):
            return "Date"
        if schema.format in ("byte", "binary"):
            return "Blob"
        return "String"

    if schema.type == "integer":
        return "Integer"

    if schema.type in ("number", "float"):
        return "Number"

    if schema.type == "boolean":
        return "Boolean"

    if schema.type == "array":
        if schema.items is None:
            raise SchemaError(f"Array without items at {path}")
        return [classify_type(schema.items, f"{path}.items")]

    if schema.type == "object":
        extra = schema.additional_properties
        if schema.properties is None and isinstance(extra, SwaggerSchema):
            return {"String": classify_type(extra, f"{path}.additionalProperties")}
        return "Object"

    raise SchemaError(f"Unhandled schema type {schema.type!r} at {path}")


def _build_enum(name: str, schema: SwaggerSchema) -> type:
    members: List[Tuple[str, Any]] = []
    seen = set()
    for value in schema.enum or []:
        member = _enum_member_name(value)
        while member in seen:
            member += "_"
        seen.add(member)
        members.append((member, value))
    if schema.type == "string":
        return Enum(name, members, type=str, module=__name__)
    return Enum(name, members, module=__name__)


def _build_class(name: str, schema: SwaggerSchema) -> type:
    swagger_types: Dict[str, Any] = {}
    attribute_map: Dict[str, str] = {}
    fields = []
    for wire_name, prop in (schema.properties or {}).items():
        attr = to_snake_case(wire_name)
        while attr in attribute_map:
            attr += "_"
        attribute_map[attr] = wire_name
        swagger_types[attr] = classify_type(prop, f"{name}.{wire_name}")
        fields.append((attr, Any, field(default=UNSET)))

    namespace = {
        "swagger_types": swagger_types,
        "attribute_map": attribute_map,
        "__module__": __name__,
    }
    doc = schema.description or schema.title
    if doc:
        namespace["__doc__"] = doc
    return make_dataclass(name, fields, bases=(BaseDTO,), namespace=namespace)


def build_models(document: SwaggerDocument) -> Dict[str, type]:
    """
    Build (without registering) a class for every usable definition.

    Object definitions without properties are skipped.
    """

    models: Dict[str, type] = {}
    for name, schema in document.definitions.items():
        if not name.isidentifier():
            logger.warning("Skipping definition with unusable name %r", name)
            continue
        if schema.enum is not None:
            models[name] = _build_enum(name, schema)
            continue
        if schema.properties:
            models[name] = _build_class(name, schema)
            continue
        logger.debug("Skipping definition %s without properties", name)
    return models


def _read_document(source: Union[str, Path]) -> Any:
    path = Path(source)
    try:
        with open(path, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON in Swagger file {path}: {exc}") from exc
    except OSError as exc:
        raise SchemaError(f"Failed to read Swagger file {path}: {exc}") from exc


def load_swagger(
    source: Union[str, Path, Mapping[str, Any]],
    replace: bool = False,
) -> Dict[str, type]:
    """
    Load models from a Swagger document path or an already-parsed dict.

    Every built class is registered; a model already registered under the
    same name is kept unless ``replace`` is true.

    Raises:
        SchemaError: If the document cannot be read or has the wrong shape.
    """

    raw = dict(source) if isinstance(source, Mapping) else _read_document(source)

    try:
        document = SwaggerDocument.model_validate(raw)
    except ValidationError as exc:
        raise SchemaError(f"Invalid Swagger document: {exc}") from exc

    models = build_models(document)
    for cls in models.values():
        register_model(cls, replace=replace)

    logger.info("Loaded %d model(s) from Swagger definitions", len(models))
    return models

