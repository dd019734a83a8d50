"""
Settings models of the Cells REST API.

The admin settings tree is a ``RestSettingsMenu`` made of sections, each
listing ``RestSettingsEntry`` items. Access to an entry is described by
``RestSettingsAccess`` records keyed by access name, each carrying the
policies that grant it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Union

from ..api_client import register_model
from ..core.dto import UNSET, BaseDTO, Unset


@register_model
@dataclass
class RestSettingsAccessRestPolicy(BaseDTO):
    action: Union[str, Unset] = UNSET
    resource: Union[str, Unset] = UNSET

    swagger_types = {
        "action": "String",
        "resource": "String",
    }
    attribute_map = {
        "action": "Action",
        "resource": "Resource",
    }


@register_model
@dataclass
class RestSettingsAccess(BaseDTO):
    label: Union[str, Unset] = UNSET
    description: Union[str, Unset] = UNSET
    policies: Union[List[RestSettingsAccessRestPolicy], Unset] = UNSET

    swagger_types = {
        "label": "String",
        "description": "String",
        "policies": [RestSettingsAccessRestPolicy],
    }
    attribute_map = {
        "label": "Label",
        "description": "Description",
        "policies": "Policies",
    }


@register_model
@dataclass
class RestSettingsEntryMeta(BaseDTO):
    """
    Display hints for a settings entry or menu.
    """

    icon_class: Union[str, Unset] = UNSET
    component: Union[str, Unset] = UNSET
    props: Union[str, Unset] = UNSET
    advanced: Union[bool, Unset] = UNSET
    indexed: Union[List[str], Unset] = UNSET

    swagger_types = {
        "icon_class": "String",
        "component": "String",
        "props": "String",
        "advanced": "Boolean",
        "indexed": ["String"],
    }
    attribute_map = {
        "icon_class": "IconClass",
        "component": "Component",
        "props": "Props",
        "advanced": "Advanced",
        "indexed": "Indexed",
    }


@register_model
@dataclass
class RestSettingsEntry(BaseDTO):
    key: Union[str, Unset] = UNSET
    label: Union[str, Unset] = UNSET
    description: Union[str, Unset] = UNSET
    manager: Union[str, Unset] = UNSET
    alias: Union[str, Unset] = UNSET
    metadata: Union[RestSettingsEntryMeta, Unset] = UNSET
    accesses: Union[Dict[str, RestSettingsAccess], Unset] = UNSET

    swagger_types = {
        "key": "String",
        "label": "String",
        "description": "String",
        "manager": "String",
        "alias": "String",
        "metadata": RestSettingsEntryMeta,
        "accesses": {"String": RestSettingsAccess},
    }
    attribute_map = {
        "key": "Key",
        "label": "Label",
        "description": "Description",
        "manager": "Manager",
        "alias": "Alias",
        "metadata": "Metadata",
        "accesses": "Accesses",
    }


@register_model
@dataclass
class RestSettingsSection(BaseDTO):
    key: Union[str, Unset] = UNSET
    label: Union[str, Unset] = UNSET
    description: Union[str, Unset] = UNSET
    children: Union[List[RestSettingsEntry], Unset] = UNSET

    swagger_types = {
        "key": "String",
        "label": "String",
        "description": "String",
        "children": [RestSettingsEntry],
    }
    attribute_map = {
        "key": "Key",
        "label": "Label",
        "description": "Description",
        "children": "Children",
    }


@register_model
@dataclass
class RestSettingsMenu(BaseDTO):
    metadata: Union[RestSettingsEntryMeta, Unset] = UNSET
    sections: Union[List[RestSettingsSection], Unset] = UNSET

    swagger_types = {
        "metadata": RestSettingsEntryMeta,
        "sections": [RestSettingsSection],
    }
    attribute_map = {
        "metadata": "Metadata",
        "sections": "Sections",
    }
