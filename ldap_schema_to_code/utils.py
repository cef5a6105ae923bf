"""
Utility functions for the LDAP schema to code generator.
"""


def capitalize(name: str | None) -> str | None:
    """Upper-case the first character of ``name`` and leave the rest untouched.

    Unlike ``str.capitalize`` this keeps camelCase intact:

    Examples:
        "inetOrgPerson" -> "InetOrgPerson"
        "person" -> "Person"
        "" -> ""
    """
    if not name:
        return name
    return name[0].upper() + name[1:]


def to_field_identifier(name: str) -> str:
    """Convert an LDAP attribute name to a field identifier.

    Hyphens become underscores and the first character is lower-cased.

    Examples:
        "CN" -> "cN"
        "telephoneNumber" -> "telephoneNumber"
        "x-employee-id" -> "x_employee_id"

    Raises:
        ValueError: If the name is empty
    """
    if not name:
        raise ValueError("LDAP attribute name can't be empty.")
    result = name.replace("-", "_")
    return result[0].lower() + result[1:]


def package_to_path(package: str) -> str:
    """Turn a dotted package name into a relative directory path ("a.b" -> "a/b")."""
    return "/".join(part for part in package.split(".") if part)
