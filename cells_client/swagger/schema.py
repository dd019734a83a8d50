"""
Pydantic models describing the parts of a Swagger 2.0 document that the
loader reads. Unknown keys are ignored.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SwaggerSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: Optional[str] = None
    format: Optional[str] = None
    ref: Optional[str] = Field(default=None, alias="$ref")
    title: Optional[str] = None
    description: Optional[str] = None
    enum: Optional[List[Any]] = None
    items: Optional[SwaggerSchema] = None
    properties: Optional[Dict[str, SwaggerSchema]] = None
    additional_properties: Optional[Union[bool, SwaggerSchema]] = Field(
        default=None, alias="additionalProperties"
    )


SwaggerSchema.model_rebuild()


class SwaggerInfo(BaseModel):
    title: Optional[str] = None
    version: Optional[str] = None


class SwaggerDocument(BaseModel):
    swagger: str = "2.0"
    info: Optional[SwaggerInfo] = None
    definitions: Dict[str, SwaggerSchema] = Field(default_factory=dict)
