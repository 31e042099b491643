"""
Program Points

Instrumentable locations and the variables visible at them.
"""

from .models import ProgramPoint, ProgramPointKind, VariableInfo

__all__ = [
    "ProgramPoint",
    "ProgramPointKind",
    "VariableInfo",
]
