"""
Program Structure

Declaration tree of a program and its ID scheme.

Key components:
- models: Structure elements (Package/Class/Field/Method/Constructor)
- program: Program container with lookup and enumeration
- id_strategy: Element and program point ID generation
"""

from .id_strategy import (
    build_constructor_signature,
    build_method_signature,
    generate_element_id,
    generate_fqn,
    generate_point_id,
    package_file_path,
)
from .models import (
    CLASS_LIKE_KINDS,
    ClassElement,
    ConstructorElement,
    ElementKind,
    FieldElement,
    MethodElement,
    PackageElement,
    ProgramStructureElement,
    StaticBlockElement,
)
from .program import Program

__all__ = [
    # Models
    "ProgramStructureElement",
    "PackageElement",
    "ClassElement",
    "FieldElement",
    "MethodElement",
    "ConstructorElement",
    "StaticBlockElement",
    "Program",
    # Enums
    "ElementKind",
    "CLASS_LIKE_KINDS",
    # ID Strategy
    "generate_fqn",
    "generate_element_id",
    "generate_point_id",
    "build_method_signature",
    "build_constructor_signature",
    "package_file_path",
]
