"""
Jinja2 template renderer for generated artifacts.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from os import PathLike
from pathlib import Path
from typing import Any

import jinja2

from ...utils import capitalize
from ..errors import TemplateLoadError
from ..schema_model.nodes import Attribute, ValueKind

TEMPLATE_DIR = Path(__file__).parent.parent.parent / "templates"


class ArtifactKind(str, Enum):
    """Kinds of generated artifacts, one template each."""

    TYPE = "type"
    MAPPER = "mapper"


PYTHON_TYPE_MAP = {
    ValueKind.TEXT: "str",
    ValueKind.BYTES: "bytes",
    ValueKind.OBJECT: "Any",
}


def python_type(attribute: Attribute) -> str:
    """Python annotation for an attribute's values ("str", "list[bytes]", ...)."""
    base = PYTHON_TYPE_MAP[attribute.value_kind]
    return f"list[{base}]" if attribute.is_sequence else base


class TemplateRenderer:
    """Loads and renders artifact templates."""

    FILE_EXTENSION = "py"

    def __init__(self, template_dir: str | PathLike = TEMPLATE_DIR):
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        # Add custom filters
        self.jinja_env.filters["python_type"] = python_type
        self.jinja_env.filters["capitalize_first"] = capitalize
        self.jinja_env.filters["pyrepr"] = repr
        self.jinja_env.filters["pytuple"] = lambda values: repr(tuple(values))

    def load(self, kind: ArtifactKind, override_path: str | PathLike | None = None) -> jinja2.Template:
        """
        Load the template for one artifact kind.

        Args:
            kind: Artifact kind
            override_path: Template file to use instead of the bundled one

        Returns:
            Compiled template

        Raises:
            TemplateLoadError: If the override can't be read or compiled
        """
        if override_path is None:
            return self.jinja_env.get_template(f"{kind.value}.{self.FILE_EXTENSION}.jinja2")

        try:
            with open(override_path, encoding="utf-8") as f:
                return self.jinja_env.from_string(f.read())
        except (OSError, UnicodeDecodeError, jinja2.TemplateSyntaxError) as e:
            raise TemplateLoadError(str(override_path), e) from e

    def render(self, template: jinja2.Template, context: dict[str, Any]) -> str:
        return template.render(context)

    def generate(self, template: jinja2.Template, context: dict[str, Any]) -> Iterator[str]:
        """Render lazily, chunk by chunk, for streaming into a file."""
        return template.generate(context)
