"""Controller metadata models.

These are the read-only records the generator consumes. They are produced
either by the registration API in ``registry`` or by loading a metadata
file, never mutated afterwards: sequences are tuples and mappings are
read-only views.

Enum labels are matched case-insensitively, so ``PARAM``/``param`` and
``GET``/``get`` both validate.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class HttpMethod(str, Enum):
    """Request methods. Values are the upper-case names used as ``paths`` keys."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ArgsType(str, Enum):
    """How a handler argument is bound. Values double as OpenAPI ``in`` locations."""

    PARAM = "param"
    QUERY = "query"
    BODY = "body"
    CONTEXT = "context"
    REQUEST = "request"
    RESPONSE = "response"
    HEADER = "header"
    COOKIE = "cookie"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


class RouteDefinition(_Frozen):
    """A single route declared on a controller."""

    method_name: str = Field(alias="methodName")
    path: str  # relative to the controller prefix, e.g. /:id
    request_method: HttpMethod = Field(alias="requestMethod")

    @field_validator("request_method", mode="before")
    @classmethod
    def _upper_method(cls, value):
        return value.upper() if isinstance(value, str) else value


class DocModel(_Frozen):
    description: str


class DocDefinition(_Frozen):
    doc_for: str = Field(alias="docFor")
    model: DocModel


class RouteArgument(_Frozen):
    """Binding of one handler argument."""

    arg_for: str = Field(alias="argFor")
    type: ArgsType
    key: str
    schema_type: str | None = Field(default=None, alias="schemaType")

    @field_validator("type", mode="before")
    @classmethod
    def _lower_type(cls, value):
        return value.lower() if isinstance(value, str) else value


class ControllerMetadata(_Frozen):
    """Everything known about one controller class."""

    name: str | None = None
    prefix: str | None = None  # None marks a non-controller
    routes: tuple[RouteDefinition, ...]
    docs: tuple[DocDefinition, ...] = ()
    default_response_codes: Mapping[str, int] = Field(default={}, alias="defaultResponseCodes", validate_default=True)
    args: tuple[RouteArgument, ...] = ()
    arg_types: Mapping[str, tuple[str, ...]] = Field(default={}, alias="argTypes", validate_default=True)

    @field_validator("default_response_codes", "arg_types", mode="after")
    @classmethod
    def _read_only(cls, value):
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _unique_method_names(self) -> "ControllerMetadata":
        seen = set()
        for route in self.routes:
            if route.method_name in seen:
                raise ValueError(f"duplicate route methodName: {route.method_name}")
            seen.add(route.method_name)
        return self
