"""
Process listing models of the Cells REST API.

``RestListProcessesRequest`` filters the processes running in a cluster,
``RestListProcessesResponse`` carries the matching ``RestProcess`` entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

from ..api_client import register_model
from ..core.dto import UNSET, BaseDTO, Unset


@register_model
@dataclass
class RestListProcessesRequest(BaseDTO):
    peer_id: Union[str, Unset] = UNSET
    service_name: Union[str, Unset] = UNSET

    swagger_types = {
        "peer_id": "String",
        "service_name": "String",
    }
    attribute_map = {
        "peer_id": "PeerId",
        "service_name": "ServiceName",
    }


@register_model
@dataclass
class RestProcess(BaseDTO):
    """
    One process of a Cells node, with the services it runs.
    """

    id: Union[str, Unset] = UNSET
    parent_id: Union[str, Unset] = UNSET
    metrics_port: Union[int, Unset] = UNSET
    peer_id: Union[str, Unset] = UNSET
    peer_address: Union[str, Unset] = UNSET
    start_tag: Union[str, Unset] = UNSET
    services: Union[List[str], Unset] = UNSET

    swagger_types = {
        "id": "String",
        "parent_id": "String",
        "metrics_port": "Integer",
        "peer_id": "String",
        "peer_address": "String",
        "start_tag": "String",
        "services": ["String"],
    }
    attribute_map = {
        "id": "ID",
        "parent_id": "ParentID",
        "metrics_port": "MetricsPort",
        "peer_id": "PeerId",
        "peer_address": "PeerAddress",
        "start_tag": "StartTag",
        "services": "Services",
    }


@register_model
@dataclass
class RestListProcessesResponse(BaseDTO):
    processes: Union[List[RestProcess], Unset] = UNSET

    swagger_types = {
        "processes": [RestProcess],
    }
    attribute_map = {
        "processes": "Processes",
    }
