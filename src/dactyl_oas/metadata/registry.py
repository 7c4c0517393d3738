"""Explicit controller registration.

Controllers describe their routes, arguments and docs as plain data at
composition time. ``Application`` is the boundary the generator reads from.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from pydantic import ValidationError

from dactyl_oas.errors import ConfigurationError
from dactyl_oas.metadata.base import (
    ArgsType,
    ControllerMetadata,
    DocDefinition,
    DocModel,
    HttpMethod,
    RouteArgument,
    RouteDefinition,
)

_REGISTRY: dict[Any, ControllerMetadata] = {}


class ControllerBuilder:
    """Fluent builder producing a ``ControllerMetadata`` record."""

    def __init__(self, prefix: str | None, name: str | None = None):
        self.prefix = prefix
        self.name = name
        self._routes: list[dict] = []
        self._docs: list[dict] = []
        self._codes: dict[str, int] = {}
        self._args: list[dict] = []
        self._arg_types: dict[str, list[str]] = {}

    def route(
        self,
        method_name: str,
        path: str,
        request_method: HttpMethod | str,
        description: str | None = None,
        status: int | None = None,
    ) -> "ControllerBuilder":
        self._routes.append(
            {"method_name": method_name, "path": path, "request_method": request_method}
        )
        if description is not None:
            self._docs.append({"doc_for": method_name, "model": {"description": description}})
        if status is not None:
            self._codes[method_name] = status
        return self

    def arg(
        self,
        method_name: str,
        type: ArgsType | str,
        key: str,
        schema_type: str | None = None,
    ) -> "ControllerBuilder":
        self._args.append(
            {"arg_for": method_name, "type": type, "key": key, "schema_type": schema_type}
        )
        return self

    def arg_types(self, method_name: str, types: Iterable[str]) -> "ControllerBuilder":
        self._arg_types[method_name] = list(types)
        return self

    def build(self) -> ControllerMetadata:
        try:
            return ControllerMetadata(
                name=self.name,
                prefix=self.prefix,
                routes=[RouteDefinition(**r) for r in self._routes],
                docs=[DocDefinition(doc_for=d["doc_for"], model=DocModel(**d["model"])) for d in self._docs],
                default_response_codes=self._codes,
                args=[RouteArgument(**a) for a in self._args],
                arg_types=self._arg_types,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid controller {self.name or self.prefix!r}: {e}") from e


def register_controller(target: Any, metadata: ControllerMetadata) -> None:
    """Attach metadata to a class-like identifier."""
    _REGISTRY[target] = metadata


def unregister_controller(target: Any) -> None:
    _REGISTRY.pop(target, None)


def get_controller_meta(target: Any) -> ControllerMetadata | None:
    """Return the metadata for ``target``, or None if it is not a controller."""
    if isinstance(target, ControllerMetadata):
        return target
    try:
        return _REGISTRY.get(target)
    except TypeError:
        # unhashable targets can never have been registered
        return None


def coerce_metadata(value: Any) -> ControllerMetadata | None:
    """Validate one lookup result at the input boundary."""
    if value is None or isinstance(value, ControllerMetadata):
        return value
    if isinstance(value, Mapping):
        try:
            return ControllerMetadata.model_validate(value)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid controller metadata: {e}") from e
    raise ConfigurationError(
        f"Expected ControllerMetadata, got {type(value).__name__}"
    )


class Application:
    """The set of controllers an application exposes."""

    def __init__(
        self,
        controllers: Iterable[Any],
        lookup: Callable[[Any], Any] = get_controller_meta,
    ):
        self.controllers = list(controllers)
        self.lookup = lookup

    def controller_metadata(self) -> Iterator[ControllerMetadata | None]:
        for controller in self.controllers:
            yield coerce_metadata(self.lookup(controller))
