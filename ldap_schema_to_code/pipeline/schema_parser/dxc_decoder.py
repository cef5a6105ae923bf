"""
Line decoder for DXC style schema files.

Declarations look like::

    schema set attribute 2.5.4.3 = {
        name = cn
        ldap-names = cn, commonName
        syntax = caseIgnoreString
        single-valued
    };

    schema set object-class 2.5.6.6 = {
        name = person
        subclass-of top
        kind = structural
        must-contain
            cn,
            sn
        may-contain
            description
    };

    schema set name-binding nb-person = {
        name = person-organization
        person allowable-parent organization
        named-by cn
    };
"""

from __future__ import annotations

import re
from enum import Enum

from ..diagnostics import Diagnostics
from ..schema_model.nodes import Attribute, ObjectClass, Schema, SchemaBinding
from .base import LineDecoder

_BLOCK_START = re.compile(r"^(?:schema\s+)?set\s+(attribute|object-class|name-binding)\b", re.IGNORECASE)
_ALLOWABLE_PARENT = re.compile(r"\s*\ballowable-parent\b\s*", re.IGNORECASE)


class BlockType(str, Enum):
    ATTRIBUTE = "attribute"
    OBJECT_CLASS = "object-class"
    NAME_BINDING = "name-binding"


class ListMode(str, Enum):
    REQUIRED = "must-contain"
    OPTIONAL = "may-contain"


def _clean(value: str) -> str:
    return value.strip().rstrip(",;").strip()


def _split_names(value: str) -> list[str]:
    return [name for name in (_clean(part) for part in value.split(",")) if name]


def _split_keyword(line: str) -> tuple[str, str | None]:
    """Split ``key = value`` or ``key value`` into (key, value).

    The value is None when the line holds a single word.
    """
    if "=" in line:
        key, _, value = line.partition("=")
        if len(key.split()) == 1:
            return key.strip().lower(), _clean(value)
    parts = line.split(None, 1)
    if len(parts) == 1:
        return _clean(parts[0]).lower(), None
    return parts[0].lower(), _clean(parts[1])


class DxcLineDecoder(LineDecoder):
    """Decodes DXC schema declarations into a Schema."""

    def __init__(self, diagnostics: Diagnostics | None = None):
        self.diagnostics = diagnostics or Diagnostics()
        self.reset()

    def reset(self) -> None:
        self._block: BlockType | None = None
        self._fields: dict[str, str | bool | None] = {}
        self._object_class: ObjectClass | None = None
        self._list_mode: ListMode | None = None

    def consume_line(self, line: str, schema: Schema) -> None:
        if not line or line.startswith("#"):
            return

        match = _BLOCK_START.match(line)
        if match:
            if self._block is not None:
                self.diagnostics.warning("Unterminated %s declaration before '%s'", self._block.value, line)
                self._close_block(schema)
            self._open_block(BlockType(match.group(1).lower()))
            # Declarations may start or even end on the header line
            _, brace, rest = line.partition("{")
            if brace and rest.strip():
                self._consume_block_content(rest.strip(), schema)
            return

        if self._block is None:
            self.diagnostics.debug("Ignoring line outside of any declaration: %s", line)
            return

        self._consume_block_content(line, schema)

    def _consume_block_content(self, line: str, schema: Schema) -> None:
        stripped = line.rstrip(";").rstrip()
        closes = stripped.endswith("}")
        content = stripped.rstrip("}").strip() if closes else line
        if content and content != "{":
            self._consume_block_line(content)
        if closes:
            self._close_block(schema)

    def finish(self, schema: Schema) -> None:
        if self._block is not None:
            self.diagnostics.warning("Unterminated %s declaration at end of input", self._block.value)
            self._close_block(schema)

    def _open_block(self, block: BlockType) -> None:
        self._block = block
        self._fields = {}
        self._list_mode = None
        self._object_class = ObjectClass() if block == BlockType.OBJECT_CLASS else None

    def _consume_block_line(self, line: str) -> None:
        if self._block == BlockType.ATTRIBUTE:
            self._consume_attribute_line(line)
        elif self._block == BlockType.OBJECT_CLASS:
            self._consume_object_class_line(line)
        else:
            self._consume_name_binding_line(line)

    def _consume_attribute_line(self, line: str) -> None:
        key, value = _split_keyword(line)
        if key == "name":
            self._fields["name"] = value
        elif key == "ldap-names":
            self._fields["alternate_names"] = value
        elif key == "syntax":
            self._fields["syntax"] = value
        elif key == "single-valued":
            self._fields["multi_valued"] = False
        elif key == "multi-valued":
            self._fields["multi_valued"] = True

    def _consume_object_class_line(self, line: str) -> None:
        object_class = self._object_class
        key, value = _split_keyword(line)
        has_assignment = "=" in line

        if key in (ListMode.REQUIRED.value, ListMode.OPTIONAL.value):
            self._list_mode = ListMode(key)
            if value:
                self._add_attribute_names(value)
            return

        if key == "subclass-of":
            self._list_mode = None
            object_class.subclass_of = value
        elif has_assignment and key in ("name", "ldap-names", "kind"):
            self._list_mode = None
            if key == "name":
                object_class.name = value
            elif key == "ldap-names":
                object_class.alternate_names = value
            else:
                object_class.kind = value
        elif has_assignment:
            # Keywords we don't model (oid, description, ...)
            self._list_mode = None
        elif self._list_mode is not None:
            self._add_attribute_names(line)
        else:
            self.diagnostics.debug("Ignoring object class line: %s", line)

    def _add_attribute_names(self, value: str) -> None:
        for name in _split_names(value):
            if self._list_mode == ListMode.REQUIRED:
                self._object_class.add_required_attribute_name(name)
            else:
                self._object_class.add_optional_attribute_name(name)

    def _consume_name_binding_line(self, line: str) -> None:
        if _ALLOWABLE_PARENT.search(line):
            ldap_name, allowable_parent = _ALLOWABLE_PARENT.split(line, maxsplit=1)
            self._fields["ldap_name"] = _clean(ldap_name)
            self._fields["allowable_parent"] = _clean(allowable_parent)
            return

        key, value = _split_keyword(line)
        if key == "name":
            self._fields["binding_name"] = value
        elif key == "named-by" and value:
            names = _split_names(value)
            self._fields["named_by"] = names[0] if names else None

    def _close_block(self, schema: Schema) -> None:
        block = self._block
        if block == BlockType.ATTRIBUTE:
            name = self._fields.get("name")
            if name:
                schema.add_attribute(
                    Attribute(
                        name=name,
                        alternate_names=self._fields.get("alternate_names") or name,
                        syntax=self._fields.get("syntax"),
                        multi_valued=self._fields.get("multi_valued", True),
                    )
                )
            else:
                self.diagnostics.warning("Dropping attribute declaration without a name")
        elif block == BlockType.OBJECT_CLASS:
            object_class = self._object_class
            if object_class.name:
                if object_class.alternate_names is None:
                    object_class.alternate_names = object_class.name
                schema.add_object_class(object_class)
            else:
                self.diagnostics.warning("Dropping object class declaration without a name")
        else:
            if self._fields.get("ldap_name"):
                schema.add_schema_binding(
                    SchemaBinding(
                        binding_name=self._fields.get("binding_name"),
                        ldap_name=self._fields["ldap_name"],
                        allowable_parent=self._fields.get("allowable_parent"),
                        named_by=self._fields.get("named_by"),
                    )
                )
            else:
                self.diagnostics.warning("Dropping name binding without an allowable-parent rule")
        self._block = None
        self._fields = {}
        self._object_class = None
        self._list_mode = None
