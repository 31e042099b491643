"""
Structure ID Generation Strategy

Every element and program point gets a deterministic, human-readable ID:

- element:  "{file_path}#{fqn}:{KIND}[:{signature}]"
- point:    "{element_id}:::{POINT_KIND}@L{line}"

Examples:
- "src/Calc.java#com.acme.Calc.add:METHOD:int(int,int)"
- "src/Calc.java#com.acme.Calc.Calc:CONSTRUCTOR:()"
- "src/Calc.java#com.acme.Calc.add:METHOD:int(int,int):::METHOD_ENTRY@L10"
"""

from collections.abc import Sequence
from enum import Enum


def generate_fqn(parent_fqn: str | None, identifier: str) -> str:
    """Join an identifier onto its parent's fully qualified name."""
    if parent_fqn is None:
        return identifier
    return f"{parent_fqn}.{identifier}"


def generate_element_id(
    file_path: str,
    fqn: str,
    kind: Enum,
    signature: str | None = None,
) -> str:
    """
    Generate the unique ID of a structure element.

    The signature is appended only when non-empty.
    """
    element_id = f"{file_path}#{fqn}:{kind.name}"
    if signature:
        element_id += f":{signature}"
    return element_id


def generate_point_id(element_id: str, kind: Enum, line_number: int) -> str:
    """Generate the unique ID of a program point inside an element."""
    return f"{element_id}:::{kind.name}@L{line_number}"


def build_method_signature(return_type: str, param_types: Sequence[str]) -> str:
    """Build a method signature such as "void(int,String)"."""
    return f"{return_type}{build_constructor_signature(param_types)}"


def build_constructor_signature(param_types: Sequence[str]) -> str:
    """Build a constructor signature such as "(int,String)"."""
    return "(" + ",".join(param_types) + ")"


def package_file_path(package_name: str) -> str:
    """Synthetic file path used by package nodes."""
    return f"<package:{package_name}>"
