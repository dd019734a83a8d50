"""
Error payload models shared by every Cells REST endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Union

from ..api_client import register_model
from ..core.dto import UNSET, BaseDTO, Unset


@register_model
@dataclass
class ProtobufAny(BaseDTO):
    # value is the base64 text of the packed message; it is not decoded.
    type_url: Union[str, Unset] = UNSET
    value: Union[Any, Unset] = UNSET

    swagger_types = {
        "type_url": "String",
        "value": "Blob",
    }
    attribute_map = {
        "type_url": "type_url",
        "value": "value",
    }


@register_model
@dataclass
class RestError(BaseDTO):
    code: Union[str, Unset] = UNSET
    title: Union[str, Unset] = UNSET
    detail: Union[str, Unset] = UNSET
    source: Union[str, Unset] = UNSET
    meta: Union[List[ProtobufAny], Unset] = UNSET

    swagger_types = {
        "code": "String",
        "title": "String",
        "detail": "String",
        "source": "String",
        "meta": ["ProtobufAny"],
    }
    attribute_map = {
        "code": "Code",
        "title": "Title",
        "detail": "Detail",
        "source": "Source",
        "meta": "Meta",
    }
