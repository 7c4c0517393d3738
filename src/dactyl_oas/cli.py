"""CLI entry point for dactyl-oas."""

import logging
from pathlib import Path

import click

from dactyl_oas.errors import DactylError
from dactyl_oas.generator.document import OasAutogenBuilder
from dactyl_oas.generator.models import SpecDocument
from dactyl_oas.metadata.loader import load_application
from dactyl_oas.writer import FORMATS, format_for, render, write_document


def _build_document(
    metadata_path: Path,
    title: str | None = None,
    description: str | None = None,
    app_version: str | None = None,
    strict: bool = False,
    openapi_paths: bool = False,
    lowercase_methods: bool = False,
) -> SpecDocument:
    """Load metadata and build the document. CLI values override the file's info block."""
    try:
        app, info = load_application(metadata_path)
        builder = OasAutogenBuilder(
            app, strict=strict, openapi_paths=openapi_paths, lowercase_methods=lowercase_methods
        )

        # empty strings are valid overrides, only None means unset
        title = title if title is not None else info.title
        description = description if description is not None else info.description
        app_version = app_version if app_version is not None else info.version
        if title is not None:
            builder.set_title(title)
        if description is not None:
            builder.set_description(description)
        if app_version is not None:
            builder.set_application_version(app_version)

        return builder.build()
    except DactylError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log assembly details to stderr.")
def main(verbose: bool):
    """dactyl-oas: generate OpenAPI documents from controller metadata."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("metadata_path", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Write the document here instead of stdout.")
@click.option("--format", "fmt", default=None, type=click.Choice(FORMATS), help="Output format (default: from output suffix, else json).")
@click.option("--title", default=None, help="Override info.title.")
@click.option("--description", default=None, help="Override info.description.")
@click.option("--app-version", default=None, help="Override info.version.")
@click.option("--strict", is_flag=True, help="Fail when two routes declare the same path and method.")
@click.option("--openapi-paths", is_flag=True, help="Rewrite :param path segments to {param}.")
@click.option("--lowercase-methods", is_flag=True, help="Emit lower-case operation keys (get, post) as OpenAPI 3 requires.")
def build(
    metadata_path: Path,
    output: Path | None,
    fmt: str | None,
    title: str | None,
    description: str | None,
    app_version: str | None,
    strict: bool,
    openapi_paths: bool,
    lowercase_methods: bool,
):
    """Build an OpenAPI document from a controller metadata file."""
    document = _build_document(
        metadata_path, title, description, app_version, strict, openapi_paths, lowercase_methods
    )

    if output is None:
        click.echo(render(document, fmt or "json"), nl=False)
        return

    write_document(document, output, fmt or format_for(output))
    operations = sum(len(methods) for methods in document.paths.values())
    click.echo(f"Documented {operations} operations across {len(document.paths)} paths.", err=True)
    click.echo(f"Document saved to {output}", err=True)


@main.command()
@click.argument("metadata_path", type=click.Path(exists=True, path_type=Path))
@click.option("--openapi-paths", is_flag=True, help="Rewrite :param path segments to {param}.")
def routes(metadata_path: Path, openapi_paths: bool):
    """List every documented operation."""
    document = _build_document(metadata_path, openapi_paths=openapi_paths)
    for path, methods in document.paths.items():
        for method, operation in methods.items():
            click.echo(f"{method:<7} {path}  {operation.description}")
