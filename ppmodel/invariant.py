"""
Candidate Invariant

An expression over the variables visible at a program point, plus whether
dynamic evidence has disproven it.

Equality and hash use the expression only, so marking or resetting the
falsified flag never changes an invariant's identity in sets and dicts.
"""


class Invariant:
    """Candidate invariant, e.g. Invariant("x > 0")."""

    __slots__ = ("_expression", "_falsified")

    def __init__(self, expression: str):
        self._expression = expression
        self._falsified = False

    @property
    def expression(self) -> str:
        return self._expression

    @property
    def falsified(self) -> bool:
        return self._falsified

    def mark_falsified(self) -> None:
        """Record that dynamic evidence disproved this invariant."""
        self._falsified = True

    def reset_falsified(self) -> None:
        """Return this invariant to the candidate state."""
        self._falsified = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Invariant):
            return NotImplemented
        return self._expression == other._expression

    def __hash__(self) -> int:
        return hash(self._expression)

    def __str__(self) -> str:
        return self._expression + ("  [FALSIFIED]" if self._falsified else "")

    def __repr__(self) -> str:
        return f"Invariant({self._expression!r}, falsified={self._falsified})"
