"""
Resource policy models of the Cells REST API.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..api_client import register_model
from ..core.dto import UNSET, BaseDTO, Unset


@register_model
class ServiceResourcePolicyAction(str, Enum):
    ANY = "ANY"
    OWNER = "OWNER"
    READ = "READ"
    WRITE = "WRITE"
    EDIT_RULES = "EDIT_RULES"


@register_model
class ServiceResourcePolicyPolicyEffect(str, Enum):
    UNKNOWN = "unknown"
    DENY = "deny"
    ALLOW = "allow"


@register_model
@dataclass
class ServiceResourcePolicy(BaseDTO):
    """
    Grants or denies one action on a resource to a subject.

    ``json_conditions`` is kept as the raw JSON string sent by the server.
    """

    id: Union[str, Unset] = UNSET
    resource: Union[str, Unset] = UNSET
    action: Union[ServiceResourcePolicyAction, str, Unset] = UNSET
    subject: Union[str, Unset] = UNSET
    effect: Union[ServiceResourcePolicyPolicyEffect, str, Unset] = UNSET
    json_conditions: Union[str, Unset] = UNSET

    swagger_types = {
        "id": "String",
        "resource": "String",
        "action": ServiceResourcePolicyAction,
        "subject": "String",
        "effect": ServiceResourcePolicyPolicyEffect,
        "json_conditions": "String",
    }
    attribute_map = {
        "id": "id",
        "resource": "Resource",
        "action": "Action",
        "subject": "Subject",
        "effect": "Effect",
        "json_conditions": "JsonConditions",
    }
