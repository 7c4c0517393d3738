"""OpenAPI document assembly.

``OasAutogenBuilder`` reads controller metadata from an ``Application`` and
produces a ``SpecDocument``. Header fields can be overridden before calling
``build``; an instance is not synchronized, so callers sharing one across
threads must serialize setter and ``build`` calls themselves.
"""

from collections.abc import Iterable
from typing import Any

from dactyl_oas.generator.defaults import (
    APP_VERSION,
    DEFAULT_DESCRIPTION,
    DEFAULT_TITLE,
    OAS_VERSION,
)
from dactyl_oas.generator.models import Components, Info, SpecDocument
from dactyl_oas.generator.paths import build_paths
from dactyl_oas.metadata.base import ControllerMetadata
from dactyl_oas.metadata.registry import Application


class OasAutogenBuilder:
    """Builds an OpenAPI document from registered controller metadata."""

    def __init__(
        self,
        app: Application | Iterable[Any],
        strict: bool = False,
        openapi_paths: bool = False,
        lowercase_methods: bool = False,
    ):
        self.app = app if isinstance(app, Application) else Application(app)
        self.strict = strict
        self.openapi_paths = openapi_paths
        self.lowercase_methods = lowercase_methods
        self.title = DEFAULT_TITLE
        self.description = DEFAULT_DESCRIPTION
        self.application_version = APP_VERSION

    def set_title(self, title: str) -> "OasAutogenBuilder":
        self.title = title
        return self

    def set_description(self, description: str) -> "OasAutogenBuilder":
        self.description = description
        return self

    def set_application_version(self, version: str) -> "OasAutogenBuilder":
        self.application_version = version
        return self

    def build(self) -> SpecDocument:
        """Run the full pipeline and return a new document."""
        controllers: list[ControllerMetadata | None] = list(self.app.controller_metadata())
        return SpecDocument(
            openapi=OAS_VERSION,
            info=Info(
                title=self.title,
                version=self.application_version,
                description=self.description,
            ),
            paths=build_paths(
                controllers,
                strict=self.strict,
                openapi_paths=self.openapi_paths,
                lowercase_methods=self.lowercase_methods,
            ),
            components=Components(),
        )
