"""
Program Structure Models

Tree of structural elements (package → class → method/constructor/field).

Each element derives its fully qualified name and unique ID from its parent
chain at construction time, then attaches itself to the parent. Identity
(equality/hash) is the unique ID alone.
"""

import weakref
from collections.abc import Iterator, Sequence
from enum import Enum
from typing import TYPE_CHECKING, Optional

from .id_strategy import (
    build_constructor_signature,
    build_method_signature,
    generate_element_id,
    generate_fqn,
    package_file_path,
)

if TYPE_CHECKING:
    from ..points.models import ProgramPoint


# ============================================================
# Enums
# ============================================================


class ElementKind(str, Enum):
    """Structure element kinds"""

    PACKAGE = "PACKAGE"
    CLASS = "CLASS"
    INTERFACE = "INTERFACE"
    ENUM = "ENUM"
    METHOD = "METHOD"
    CONSTRUCTOR = "CONSTRUCTOR"
    FIELD = "FIELD"
    STATIC_BLOCK = "STATIC_BLOCK"
    LAMBDA = "LAMBDA"
    BLOCK = "BLOCK"
    CUSTOM = "CUSTOM"


CLASS_LIKE_KINDS = frozenset({ElementKind.CLASS, ElementKind.INTERFACE, ElementKind.ENUM})


# ============================================================
# Base Element
# ============================================================


class ProgramStructureElement:
    """
    A node in the program's declaration tree.

    Subclasses set their own attributes before calling this initializer, so
    the element is complete by the time it becomes visible to its parent.
    """

    def __init__(
        self,
        identifier: str,
        element_type: ElementKind,
        parent: Optional["ProgramStructureElement"],
        file_path: str,
        start_line: int = -1,
        end_line: int = -1,
    ):
        """
        Initialize element and register it with its parent.

        Args:
            identifier: Local name (e.g., "toString", "MyClass", "count")
            element_type: Element kind
            parent: Enclosing element, or None for top-level elements
            file_path: Path of the defining source file
            start_line: First line (inclusive), -1 if unknown
            end_line: Last line (inclusive), -1 if unknown
        """
        if not isinstance(element_type, ElementKind):
            raise TypeError(f"element_type must be an ElementKind, got {element_type!r}")

        self._identifier = identifier
        self._element_type = element_type
        self._parent = weakref.ref(parent) if parent is not None else None
        self._file_path = file_path
        self._start_line = start_line
        self._end_line = end_line
        self._children: list[ProgramStructureElement] = []
        self._program_points: list["ProgramPoint"] = []

        self._fqn = generate_fqn(parent.fully_qualified_name if parent is not None else None, identifier)
        self._unique_id = generate_element_id(file_path, self._fqn, element_type, self.signature)

        # Must stay last: the parent only ever sees fully identified children
        if parent is not None:
            parent.add_child(self)

    # ============================================================
    # Properties
    # ============================================================

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def element_type(self) -> ElementKind:
        return self._element_type

    @property
    def parent(self) -> Optional["ProgramStructureElement"]:
        # non-owning; the parent owns this element through its children
        return self._parent() if self._parent is not None else None

    @property
    def children(self) -> tuple["ProgramStructureElement", ...]:
        return tuple(self._children)

    @property
    def program_points(self) -> tuple["ProgramPoint", ...]:
        return tuple(self._program_points)

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def start_line(self) -> int:
        return self._start_line

    @property
    def end_line(self) -> int:
        return self._end_line

    @property
    def fully_qualified_name(self) -> str:
        """e.g. "foo.Bar.toString" """
        return self._fqn

    @property
    def unique_id(self) -> str:
        """e.g. "src/Foo.java#foo.Bar.toString:METHOD:String()" """
        return self._unique_id

    @property
    def signature(self) -> str:
        """Signature part of the unique ID; empty unless overridden."""
        return ""

    # ============================================================
    # Mutation (append-only)
    # ============================================================

    def add_child(self, child: "ProgramStructureElement") -> None:
        """Append a child element."""
        self._children.append(child)

    def add_program_point(self, point: "ProgramPoint") -> None:
        """
        Append a program point owned by this element.

        Raises:
            ValueError: If the point belongs to another element
        """
        if point.parent_element is not self:
            raise ValueError(
                f"Program point {point.unique_id} does not belong to {self._unique_id}"
            )
        self._program_points.append(point)

    # ============================================================
    # Traversal
    # ============================================================

    def walk(self) -> Iterator["ProgramStructureElement"]:
        """Yield this element and its descendants in pre-order."""
        yield self
        for child in self._children:
            yield from child.walk()

    # ============================================================
    # Identity
    # ============================================================

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ProgramStructureElement):
            return NotImplemented
        return self._unique_id == other._unique_id

    def __hash__(self) -> int:
        return hash(self._unique_id)

    def __str__(self) -> str:
        return f"{self._element_type.name}: {self._fqn} [{self._start_line}-{self._end_line}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(unique_id={self._unique_id!r})"


# ============================================================
# Concrete Elements
# ============================================================


class PackageElement(ProgramStructureElement):
    """A package. Always top-level, with a synthetic file path and no lines."""

    def __init__(self, package_name: str | None):
        package_name = package_name or ""
        super().__init__(
            identifier=package_name,
            element_type=ElementKind.PACKAGE,
            parent=None,
            file_path=package_file_path(package_name),
        )


class ClassElement(ProgramStructureElement):
    """A class, interface, or enum."""

    def __init__(
        self,
        simple_name: str,
        parent: ProgramStructureElement,
        file_path: str,
        start_line: int = -1,
        end_line: int = -1,
        kind: ElementKind = ElementKind.CLASS,
    ):
        if kind not in CLASS_LIKE_KINDS:
            raise ValueError(f"ClassElement kind must be CLASS, INTERFACE or ENUM, got {kind.name}")
        super().__init__(simple_name, kind, parent, file_path, start_line, end_line)


class FieldElement(ProgramStructureElement):
    """A field. One element per declared variable."""

    def __init__(
        self,
        name: str,
        field_type: str,
        parent: ProgramStructureElement,
        file_path: str,
        start_line: int = -1,
        end_line: int = -1,
    ):
        self._field_type = field_type
        super().__init__(name, ElementKind.FIELD, parent, file_path, start_line, end_line)

    @property
    def field_type(self) -> str:
        return self._field_type


class MethodElement(ProgramStructureElement):
    """A method; return and parameter types feed the signature."""

    def __init__(
        self,
        simple_name: str,
        return_type: str,
        param_types: Sequence[str],
        parent: ProgramStructureElement,
        file_path: str,
        start_line: int = -1,
        end_line: int = -1,
    ):
        self._return_type = return_type
        self._param_types = tuple(param_types)
        super().__init__(simple_name, ElementKind.METHOD, parent, file_path, start_line, end_line)

    @property
    def return_type(self) -> str:
        return self._return_type

    @property
    def param_types(self) -> tuple[str, ...]:
        return self._param_types

    @property
    def signature(self) -> str:
        return build_method_signature(self._return_type, self._param_types)


class ConstructorElement(ProgramStructureElement):
    """A constructor; parameter types feed the signature."""

    def __init__(
        self,
        simple_name: str,
        param_types: Sequence[str],
        parent: ProgramStructureElement,
        file_path: str,
        start_line: int = -1,
        end_line: int = -1,
    ):
        self._param_types = tuple(param_types)
        super().__init__(simple_name, ElementKind.CONSTRUCTOR, parent, file_path, start_line, end_line)

    @property
    def param_types(self) -> tuple[str, ...]:
        return self._param_types

    @property
    def signature(self) -> str:
        return build_constructor_signature(self._param_types)


class StaticBlockElement(ProgramStructureElement):
    """A static initializer block."""

    IDENTIFIER = "<clinit>"

    def __init__(
        self,
        parent: ProgramStructureElement,
        file_path: str,
        start_line: int = -1,
        end_line: int = -1,
    ):
        super().__init__(self.IDENTIFIER, ElementKind.STATIC_BLOCK, parent, file_path, start_line, end_line)
