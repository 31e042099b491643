"""
Program - Top-level container

Owns the forest of top-level elements (package nodes by convention) and
provides unique-ID lookup and deterministic pre-order enumeration.
"""

from typing import TYPE_CHECKING, Optional

from .models import ProgramStructureElement

if TYPE_CHECKING:
    from ..points.models import ProgramPoint


class Program:
    """A loaded program under analysis."""

    def __init__(self, name: str):
        self._name = name
        self._top_level_elements: list[ProgramStructureElement] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def top_level_elements(self) -> tuple[ProgramStructureElement, ...]:
        return tuple(self._top_level_elements)

    def add_top_level_element(self, element: ProgramStructureElement) -> None:
        """Append a root element; adding the same element twice is a no-op."""
        if any(existing is element for existing in self._top_level_elements):
            return
        self._top_level_elements.append(element)

    def find_by_unique_id(self, unique_id: str) -> Optional[ProgramStructureElement]:
        """
        Find an element by unique ID (pre-order DFS over each root).

        Returns:
            The first matching element, or None if not found
        """
        for element in self._top_level_elements:
            match = self._find_recursive(element, unique_id)
            if match is not None:
                return match
        return None

    def _find_recursive(
        self, current: ProgramStructureElement, unique_id: str
    ) -> Optional[ProgramStructureElement]:
        if current.unique_id == unique_id:
            return current
        for child in current.children:
            match = self._find_recursive(child, unique_id)
            if match is not None:
                return match
        return None

    def get_all_elements(self) -> list[ProgramStructureElement]:
        """Flatten every root in pre-order (parent first, children in insertion order)."""
        all_elements: list[ProgramStructureElement] = []
        for element in self._top_level_elements:
            all_elements.extend(element.walk())
        return all_elements

    def get_all_program_points(self) -> list["ProgramPoint"]:
        """Every program point, in element pre-order then insertion order."""
        return [point for element in self.get_all_elements() for point in element.program_points]

    def find_program_point(self, unique_id: str) -> Optional["ProgramPoint"]:
        for point in self.get_all_program_points():
            if point.unique_id == unique_id:
                return point
        return None

    def __repr__(self) -> str:
        return f"Program(name={self._name!r}, top_level={len(self._top_level_elements)})"
