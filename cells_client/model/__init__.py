"""
Cells REST API models.

Importing this package registers every model under its schema name, so
type tags may refer to models by name (e.g. ``["RestProcess"]``).
"""

from .common import ProtobufAny, RestError
from .policy import (
    ServiceResourcePolicy,
    ServiceResourcePolicyAction,
    ServiceResourcePolicyPolicyEffect,
)
from .process import RestListProcessesRequest, RestListProcessesResponse, RestProcess
from .settings import (
    RestSettingsAccess,
    RestSettingsAccessRestPolicy,
    RestSettingsEntry,
    RestSettingsEntryMeta,
    RestSettingsMenu,
    RestSettingsSection,
)

__all__ = [
    "ProtobufAny",
    "RestError",
    "RestListProcessesRequest",
    "RestListProcessesResponse",
    "RestProcess",
    "RestSettingsAccess",
    "RestSettingsAccessRestPolicy",
    "RestSettingsEntry",
    "RestSettingsEntryMeta",
    "RestSettingsMenu",
    "RestSettingsSection",
    "ServiceResourcePolicy",
    "ServiceResourcePolicyAction",
    "ServiceResourcePolicyPolicyEffect",
]
