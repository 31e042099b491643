"""
Program Loader

Source files → Program model.
"""

from .program_loader import RETURN_VARIABLE, ProgramLoader

__all__ = [
    "ProgramLoader",
    "RETURN_VARIABLE",
]
