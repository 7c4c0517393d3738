"""Serialize a generated document to text or to a file."""

import json
from pathlib import Path

import yaml

from dactyl_oas.generator.models import SpecDocument

FORMATS = ("json", "yaml")


def render(document: SpecDocument, fmt: str = "json") -> str:
    """Render ``document`` as indented JSON or YAML, keeping field order."""
    data = document.to_dict()
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unknown output format: {fmt}")


def format_for(path: Path) -> str:
    return "yaml" if path.suffix.lower() in (".yaml", ".yml") else "json"


def write_document(document: SpecDocument, path: Path, fmt: str | None = None) -> Path:
    """Write ``document`` to ``path``. The format follows the suffix unless given."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(document, fmt or format_for(path)), encoding="utf-8")
    return path
