"""Merge every controller's routes into one ``paths`` table."""

import logging
import re
from collections.abc import Iterable

from dactyl_oas.errors import PathConflictError
from dactyl_oas.generator.arguments import project_arguments
from dactyl_oas.generator.defaults import resolve_response_code
from dactyl_oas.generator.models import Operation, ResponseObject
from dactyl_oas.metadata.base import ControllerMetadata, RouteDefinition

logger = logging.getLogger(__name__)

_PATH_PARAM = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")

PathTable = dict[str, dict[str, Operation]]


def to_openapi_path(path: str) -> str:
    """Rewrite ``/users/:id`` style segments to ``/users/{id}``."""
    return _PATH_PARAM.sub(r"{\1}", path)


def build_operation(meta: ControllerMetadata, route: RouteDefinition) -> Operation:
    """Assemble the documented operation for a single route."""
    doc = next((d for d in meta.docs if d.doc_for == route.method_name), None)
    code = resolve_response_code(
        route.request_method, meta.default_response_codes.get(route.method_name)
    )
    parameters = project_arguments(
        meta.args, route.method_name, meta.arg_types.get(route.method_name, [])
    )
    return Operation(
        description=doc.model.description if doc else route.method_name,
        responses={str(code): ResponseObject(description="")},
        parameters=parameters,
    )


def build_paths(
    controllers: Iterable[ControllerMetadata | None],
    strict: bool = False,
    openapi_paths: bool = False,
    lowercase_methods: bool = False,
) -> PathTable:
    """Build the path -> method -> operation table.

    Controllers and routes are processed in declaration order. When two
    routes share a path and method the later one replaces the earlier one,
    unless ``strict`` is set, in which case ``PathConflictError`` is raised.

    Method keys are the upper-case ``HttpMethod`` values unless
    ``lowercase_methods`` is set; OpenAPI 3 tooling expects lower-case keys.
    """
    paths: PathTable = {}
    for meta in controllers:
        if meta is None or not meta.prefix:
            logger.debug("Skipping %s: no controller prefix", (meta and meta.name) or "<unnamed>")
            continue

        for route in meta.routes:
            full_path = meta.prefix + route.path
            if openapi_paths:
                full_path = to_openapi_path(full_path)
            method = route.request_method.value
            if lowercase_methods:
                method = method.lower()

            methods = paths.setdefault(full_path, {})
            if method in methods:
                if strict:
                    raise PathConflictError(full_path, method, meta.name)
                logger.warning(
                    "%s %s redeclared by %s, replacing earlier operation",
                    method, full_path, meta.name or meta.prefix,
                )
            methods[method] = build_operation(meta, route)
            logger.debug("Added %s %s", method, full_path)
    return paths
