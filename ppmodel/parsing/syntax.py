"""
Declaration Syntax Models

Parser-neutral view of one compilation unit: the package name, the
class-like declarations, and their members with erased types and line
ranges. The program loader consumes only these models.
"""

from dataclasses import dataclass, field
from typing import Literal, Protocol, Union

from ..structure.models import ElementKind

VOID_TYPE = "void"


@dataclass(frozen=True)
class ParameterSyntax:
    """Formal parameter (name, erased type)"""

    name: str
    type: str


@dataclass(frozen=True)
class FieldSyntax:
    """One field declaration; may declare several names sharing a type."""

    type: str
    names: tuple[str, ...]
    start_line: int
    end_line: int
    member_kind: Literal["field"] = "field"


@dataclass(frozen=True)
class ConstructorSyntax:
    name: str
    parameters: tuple[ParameterSyntax, ...]
    start_line: int
    end_line: int
    member_kind: Literal["constructor"] = "constructor"


@dataclass(frozen=True)
class MethodSyntax:
    name: str
    return_type: str
    parameters: tuple[ParameterSyntax, ...]
    start_line: int
    end_line: int
    member_kind: Literal["method"] = "method"

    @property
    def returns_value(self) -> bool:
        return self.return_type != VOID_TYPE


@dataclass(frozen=True)
class InitializerSyntax:
    """Static initializer block (`static { ... }`). Instance initializers are not extracted."""

    start_line: int
    end_line: int
    member_kind: Literal["initializer"] = "initializer"


MemberSyntax = Union[FieldSyntax, ConstructorSyntax, MethodSyntax, InitializerSyntax]


@dataclass(frozen=True)
class TypeDeclarationSyntax:
    """Class, interface, or enum declaration with its direct members in source order."""

    name: str
    kind: ElementKind
    start_line: int
    end_line: int
    members: tuple[MemberSyntax, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CompilationUnitSyntax:
    """
    One parsed source file.

    Attributes:
        file_path: Path as given to the parser
        package_name: Declared package, "" for the default package
        type_declarations: Every class-like declaration, nested ones included, in pre-order
    """

    file_path: str
    package_name: str
    type_declarations: tuple[TypeDeclarationSyntax, ...] = field(default_factory=tuple)


class SourceParser(Protocol):
    """Parser collaborator consumed by the program loader."""

    def parse_file(self, file_path: str) -> CompilationUnitSyntax:
        """
        Parse one file.

        Raises:
            SourceParseError: If the file cannot be parsed

        OSError, UnicodeError and ValueError are also reported by the loader
        as a load failure of this file; anything else propagates unchanged.
        """
        ...
