"""Models for the generated OpenAPI document.

Field order matches the order fields are emitted in the serialized
document. Python names differ from OpenAPI names only where the OpenAPI
name is a keyword or shadows a pydantic attribute.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _OasModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ParameterSchema(_OasModel):
    type: str | None = None  # None when no type label was registered


class Parameter(_OasModel):
    name: str
    location: str = Field(alias="in")  # path / query / header / cookie
    schema_: ParameterSchema = Field(default_factory=ParameterSchema, alias="schema")


class ResponseObject(_OasModel):
    description: str = ""


class Operation(_OasModel):
    description: str
    responses: dict[str, ResponseObject]
    parameters: list[Parameter] = []


class Info(_OasModel):
    title: str
    version: str
    description: str


class Components(_OasModel):
    """Reusable component sections. Always emitted, currently always empty."""

    schemas: dict[str, Any] = {}
    responses: dict[str, Any] = {}
    parameters: dict[str, Any] = {}
    examples: dict[str, Any] = {}
    request_bodies: dict[str, Any] = Field(default={}, alias="requestBodies")
    headers: dict[str, Any] = {}
    security_schemes: dict[str, Any] = Field(default={}, alias="securitySchemes")
    links: dict[str, Any] = {}
    callbacks: dict[str, Any] = {}


class SpecDocument(_OasModel):
    openapi: str
    info: Info
    paths: dict[str, dict[str, Operation]] = {}
    components: Components = Field(default_factory=Components)

    def to_dict(self) -> dict:
        """Plain dict using OpenAPI field names, ready for json/yaml dumping."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
