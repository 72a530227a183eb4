"""Module for the OpenAPI 3 Schema Object produced by the converter."""
from typing import Any, Dict, List, Optional, Union

from pydantic import Field

from .common import BasePydanticModel, FieldType


class OpenAPISchema(BasePydanticModel):
    """OpenAPI 3 / JSON-Schema compatible Schema Object.

    Only fields the converter sets are dumped by ``to_dict``; unset fields are
    omitted rather than emitted as nulls. Dumped keys follow the declaration
    order below, which matches how primitive schemas are assembled.
    """
    type: FieldType
    format: Optional[str] = None
    enum: Optional[List[Any]] = None
    nullable: Optional[bool] = None
    default: Any = None
    title: Optional[str] = None
    description: Optional[str] = None
    properties: Optional[Dict[str, "OpenAPISchema"]] = None
    required: Optional[List[str]] = None
    items: Optional["OpenAPISchema"] = None

    minimum: Optional[Union[int, float]] = None
    maximum: Optional[Union[int, float]] = None
    exclusive_minimum: Optional[bool] = Field(None, alias="exclusiveMinimum")
    exclusive_maximum: Optional[bool] = Field(None, alias="exclusiveMaximum")
    min_length: Optional[int] = Field(None, alias="minLength")
    max_length: Optional[int] = Field(None, alias="maxLength")
    pattern: Optional[str] = None
    min_items: Optional[int] = Field(None, alias="minItems")
    max_items: Optional[int] = Field(None, alias="maxItems")

    def to_dict(self) -> Dict[str, Any]:
        """Dump using OpenAPI field names, keeping only fields that were set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


OpenAPISchema.model_rebuild()
