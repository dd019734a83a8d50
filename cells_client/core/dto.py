"""
Common DTO utilities for the Cells model layer.

Every REST model is a dataclass that inherits from ``BaseDTO`` and declares
two class-level tables:

- ``attribute_map``: Python attribute name -> JSON wire name
- ``swagger_types``: Python attribute name -> type tag understood by
  ``api_client.convert_to_type``

``BaseDTO.construct_from_object`` reads those tables, so concrete models
contain no conversion code of their own.

Fields absent from a payload hold the ``UNSET`` marker, which is distinct
from ``None`` (an explicit JSON null).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar

from ..api_client import convert_to_type, sanitize_for_serialization


class Unset:
    """
    Marker type for fields that were not present in the source payload.
    """

    _instance: Optional["Unset"] = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"

    def __copy__(self) -> "Unset":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Unset":
        return self

    def __reduce__(self) -> Any:
        return (Unset, ())


UNSET = Unset()


T_BaseDTO = TypeVar("T_BaseDTO", bound="BaseDTO")


@dataclass
class BaseDTO:
    """
    Base mixin for REST model dataclasses.
    """

    swagger_types: ClassVar[Dict[str, Any]] = {}
    attribute_map: ClassVar[Dict[str, str]] = {}

    @classmethod
    def construct_from_object(
        cls: Type[T_BaseDTO],
        data: Any,
        obj: Optional[T_BaseDTO] = None,
    ) -> Optional[T_BaseDTO]:
        """
        Construct a model from a plain JSON object, optionally populating
        an existing instance.

        Only declared fields that are keys of ``data`` itself are copied,
        each coerced to its declared type. When ``data`` is None or a falsy
        scalar (0, "", False), ``obj`` is returned unchanged (None if it was
        not supplied). Empty mappings and lists still give a new record.
        """

        if data is None or (not data and not isinstance(data, (Mapping, list, tuple))):
            return obj
        if obj is None:
            obj = cls()
        if not isinstance(data, Mapping):
            return obj

        for attr, wire_name in cls.attribute_map.items():
            if wire_name in data:
                setattr(obj, attr, convert_to_type(data[wire_name], cls.swagger_types[attr]))
        return obj

    @classmethod
    def from_dict(cls: Type[T_BaseDTO], data: Any) -> T_BaseDTO:
        """
        Like ``construct_from_object`` but always returns an instance.
        """

        obj = cls.construct_from_object(data)
        return obj if obj is not None else cls()

    @classmethod
    def field_names(cls) -> List[str]:
        return list(cls.attribute_map.values())

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert this DTO into a plain dict keyed by wire names (recursively).

        Fields still holding ``UNSET`` are left out.
        """

        result: Dict[str, Any] = {}
        for attr, wire_name in self.attribute_map.items():
            value = getattr(self, attr, UNSET)
            if isinstance(value, Unset):
                continue
            result[wire_name] = sanitize_for_serialization(value)
        return result

    def is_set(self, attr: str) -> bool:
        return not isinstance(getattr(self, attr, UNSET), Unset)
