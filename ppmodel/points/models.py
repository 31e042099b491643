"""
Program Point Models

A program point is an instrumentable location inside one structure element
(method entry, method exit, ...). It carries a snapshot of the variables
visible there and the candidate invariants attached to it.
"""

import weakref
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from ..invariant import Invariant
from ..structure.id_strategy import generate_point_id

if TYPE_CHECKING:
    from ..structure.models import ProgramStructureElement


class ProgramPointKind(str, Enum):
    """Program point kinds"""

    METHOD_ENTRY = "METHOD_ENTRY"
    METHOD_EXIT = "METHOD_EXIT"
    CONSTRUCTOR_ENTRY = "CONSTRUCTOR_ENTRY"
    CONSTRUCTOR_EXIT = "CONSTRUCTOR_EXIT"
    LOOP_HEADER_ENTRY = "LOOP_HEADER_ENTRY"
    LOOP_HEADER_EXIT = "LOOP_HEADER_EXIT"
    LOOP_BODY_ENTRY = "LOOP_BODY_ENTRY"
    LOOP_BODY_EXIT = "LOOP_BODY_EXIT"
    STATIC_BLOCK_ENTRY = "STATIC_BLOCK_ENTRY"
    STATIC_BLOCK_EXIT = "STATIC_BLOCK_EXIT"
    LAMBDA_ENTRY = "LAMBDA_ENTRY"
    LAMBDA_EXIT = "LAMBDA_EXIT"
    IF_CONDITION = "IF_CONDITION"  # condition check only
    FIELD_READ = "FIELD_READ"
    FIELD_WRITE = "FIELD_WRITE"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class VariableInfo:
    """A variable visible at a program point"""

    name: str
    type: str

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


class ProgramPoint:
    """
    A named location inside one structure element.

    Immutable except for the contents of the invariant list.
    """

    def __init__(
        self,
        parent_element: "ProgramStructureElement",
        kind: ProgramPointKind,
        line_number: int,
        visible_variables: Iterable[VariableInfo] = (),
        invariants: Iterable[Invariant] = (),
    ):
        """
        Initialize program point.

        Args:
            parent_element: Owning structure element
            kind: Point kind
            line_number: Source line of the point
            visible_variables: Variables in scope (copied)
            invariants: Initial candidate invariants (copied, de-duplicated)
        """
        self._parent = weakref.ref(parent_element)
        self._file_path = parent_element.file_path
        self._element_fqn = parent_element.fully_qualified_name
        self._kind = kind
        self._line_number = line_number
        self._visible_variables = tuple(visible_variables)
        self._invariants: list[Invariant] = []
        self._unique_id = generate_point_id(parent_element.unique_id, kind, line_number)

        for invariant in invariants:
            self.add_invariant(invariant)

    @property
    def parent_element(self) -> Optional["ProgramStructureElement"]:
        return self._parent()

    @property
    def kind(self) -> ProgramPointKind:
        return self._kind

    @property
    def line_number(self) -> int:
        return self._line_number

    @property
    def file_path(self) -> str:
        return self._file_path

    @property
    def unique_id(self) -> str:
        return self._unique_id

    @property
    def visible_variables(self) -> tuple[VariableInfo, ...]:
        return self._visible_variables

    @property
    def invariants(self) -> tuple[Invariant, ...]:
        return tuple(self._invariants)

    def add_invariant(self, invariant: Invariant) -> bool:
        """
        Attach a candidate invariant.

        Returns:
            False if an invariant with the same expression is already attached
        """
        if invariant in self._invariants:
            return False
        self._invariants.append(invariant)
        return True

    def surviving_invariants(self) -> list[Invariant]:
        """Invariants not yet falsified."""
        return [inv for inv in self._invariants if not inv.falsified]

    def reset_invariants(self) -> None:
        """Reset the falsified flag of every attached invariant."""
        for invariant in self._invariants:
            invariant.reset_falsified()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, ProgramPoint):
            return NotImplemented
        return self._unique_id == other._unique_id

    def __hash__(self) -> int:
        return hash(self._unique_id)

    def __str__(self) -> str:
        return f"{self._kind.name} @ {self._element_fqn} line {self._line_number}"

    def __repr__(self) -> str:
        return f"ProgramPoint(unique_id={self._unique_id!r})"
