"""
Tests for naming helpers.
"""

import pytest

from ldap_schema_to_code.utils import capitalize, package_to_path, to_field_identifier


@pytest.mark.parametrize(
    "name,expected",
    [
        ("person", "Person"),
        ("inetOrgPerson", "InetOrgPerson"),
        ("Top", "Top"),
        ("x", "X"),
        ("", ""),
        (None, None),
    ],
)
def test_capitalize(name, expected):
    assert capitalize(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("telephoneNumber", "telephoneNumber"),
        ("CN", "cN"),
        ("x-employee-id", "x_employee_id"),
        ("Employee-Id", "employee_Id"),
    ],
)
def test_to_field_identifier(name, expected):
    assert to_field_identifier(name) == expected


def test_to_field_identifier_rejects_empty_name():
    with pytest.raises(ValueError):
        to_field_identifier("")


def test_package_to_path():
    assert package_to_path("acme.directory.types") == "acme/directory/types"
    assert package_to_path("acme") == "acme"
