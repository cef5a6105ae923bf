"""
Tests for the schema parser driver and the attribute resolution pass.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from ldap_schema_to_code.pipeline.diagnostics import Diagnostics
from ldap_schema_to_code.pipeline.errors import SchemaReadError
from ldap_schema_to_code.pipeline.schema_model import Attribute, ObjectClass, Schema, ValueKind
from ldap_schema_to_code.pipeline.schema_parser import (
    AttributeResolver,
    DxcLineDecoder,
    LineDecoder,
    SchemaParser,
)

SCHEMA_DIR = Path(__file__).parent / "test_data" / "schemas"
SCHEMA_FILES = [SCHEMA_DIR / "core.dxc", SCHEMA_DIR / "company.dxc"]


class RecordingDecoder(LineDecoder):
    """Records the lines it is given."""

    def __init__(self):
        self.lines: list[str] = []
        self.resets = 0

    def reset(self) -> None:
        self.resets += 1
        self.lines = []

    def consume_line(self, line: str, schema: Schema) -> None:
        self.lines.append(line)


def parse(files=SCHEMA_FILES, diagnostics: Diagnostics | None = None) -> Schema:
    diagnostics = diagnostics or Diagnostics()
    return SchemaParser(DxcLineDecoder(diagnostics), diagnostics).parse(files)


class TestSchemaParser:
    def test_lines_are_trimmed_and_delivered_in_order_across_files(self, tmp_path):
        first = tmp_path / "a.schema"
        second = tmp_path / "b.schema"
        first.write_text("  one  \n\ttwo\n")
        second.write_text("three\n   \n")

        decoder = RecordingDecoder()
        SchemaParser(decoder).parse([first, second])

        assert decoder.lines == ["one", "two", "three", ""]
        assert decoder.resets == 1

    def test_parser_can_be_reused(self):
        parser = SchemaParser(DxcLineDecoder())
        first = parser.parse(SCHEMA_FILES)
        second = parser.parse([SCHEMA_DIR / "core.dxc"])

        assert first is not second
        assert [oc.name for oc in second.object_classes] == ["top", "organization", "person"]
        assert "employeeid" not in second.attributes

    def test_parses_in_caller_order(self):
        schema = parse([SCHEMA_DIR / "company.dxc", SCHEMA_DIR / "core.dxc"])

        assert [oc.name for oc in schema.object_classes] == ["employee", "top", "organization", "person"]

    def test_unreadable_file_aborts(self, tmp_path):
        missing = tmp_path / "missing.dxc"

        with pytest.raises(SchemaReadError) as exc_info:
            parse([SCHEMA_DIR / "core.dxc", missing])

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_parse_logs_each_file(self):
        diagnostics = Diagnostics()
        parse(diagnostics=diagnostics)

        infos = diagnostics.messages(logging.INFO)
        assert infos == [f"Parsing {path}" for path in SCHEMA_FILES]


class TestResolution:
    def test_every_referenced_name_resolves(self):
        schema = parse()

        for object_class in schema.object_classes:
            names = object_class.required_attribute_names + object_class.optional_attribute_names
            for name in names:
                assert schema.find_attribute(name) is not None
            assert [a.name.lower() for a in object_class.required_attributes] == [
                n.lower() for n in object_class.required_attribute_names
            ]

    def test_cross_file_references(self):
        schema = parse()
        employee = schema.object_classes[-1]

        assert employee.required_attributes == [schema.attributes["employeeid"]]
        assert employee.required_attributes[0].syntax == "caseExactString"
        assert employee.required_attributes[0].value_kind == ValueKind.TEXT
        assert not employee.required_attributes[0].multi_valued

    def test_undeclared_attributes_are_synthesized_once(self):
        diagnostics = Diagnostics()
        schema = parse(diagnostics=diagnostics)
        organization = schema.object_classes[1]
        person = schema.object_classes[2]

        telephone = schema.attributes["telephonenumber"]
        assert telephone.name == "telephoneNumber"
        assert telephone.alternate_names == "telephoneNumber"
        assert telephone.syntax == "caseIgnoreString"
        assert not telephone.multi_valued
        assert telephone in organization.optional_attributes
        assert any(attribute is telephone for attribute in person.optional_attributes)

        warnings = diagnostics.messages(logging.WARNING)
        assert warnings.count("Created a default attribute object for attribute 'telephoneNumber'") == 1
        assert sorted(warnings) == sorted(
            f"Created a default attribute object for attribute '{name}'"
            for name in ["description", "telephoneNumber", "manager", "jpegPhoto"]
        )

    def test_declared_attributes_are_not_replaced(self):
        schema = parse()
        person = schema.object_classes[2]

        assert person.required_attributes == [schema.attributes["cn"], schema.attributes["sn"]]
        assert person.optional_attributes[0].value_kind == ValueKind.BYTES
        assert person.optional_attributes[0].multi_valued

    def test_lookup_is_case_insensitive(self):
        schema = Schema()
        cn = Attribute(name="cn", syntax="caseIgnoreString")
        schema.add_attribute(cn)
        person = ObjectClass(name="person", required_attribute_names=["CN"], optional_attribute_names=["Cn"])
        schema.add_object_class(person)

        AttributeResolver(schema).resolve()

        assert person.required_attributes == [cn]
        assert person.optional_attributes == [cn]
        assert list(schema.attributes) == ["cn"]

    def test_synthesis_reuses_first_spelling(self):
        schema = Schema()
        person = ObjectClass(name="person", required_attribute_names=["cn"])
        employee = ObjectClass(name="employee", required_attribute_names=["CN"])
        schema.add_object_class(person)
        schema.add_object_class(employee)

        AttributeResolver(schema).resolve()

        assert person.required_attributes[0] is employee.required_attributes[0]
        assert person.required_attributes[0].name == "cn"

    def test_resolution_is_idempotent(self):
        schema = parse()
        attributes = dict(schema.attributes)
        before = [list(oc.required_attributes) + list(oc.optional_attributes) for oc in schema.object_classes]

        AttributeResolver(schema).resolve()

        assert schema.attributes == attributes
        assert [list(oc.required_attributes) + list(oc.optional_attributes) for oc in schema.object_classes] == before
