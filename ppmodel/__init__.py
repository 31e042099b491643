"""ppmodel - Program structure and program point model for invariant detection.
"""

__version__ = "0.1.0"

from .exceptions import PPModelError, ProgramLoadError, SourceParseError, UnsupportedLanguageError
from .invariant import Invariant
from .loader import ProgramLoader
from .points import ProgramPoint, ProgramPointKind, VariableInfo
from .structure import (
    ClassElement,
    ConstructorElement,
    ElementKind,
    FieldElement,
    MethodElement,
    PackageElement,
    Program,
    ProgramStructureElement,
    StaticBlockElement,
)

__all__ = [
    # Structure
    "Program",
    "ProgramStructureElement",
    "PackageElement",
    "ClassElement",
    "FieldElement",
    "MethodElement",
    "ConstructorElement",
    "StaticBlockElement",
    "ElementKind",
    # Program points
    "ProgramPoint",
    "ProgramPointKind",
    "VariableInfo",
    "Invariant",
    # Loading
    "ProgramLoader",
    # Errors
    "PPModelError",
    "SourceParseError",
    "ProgramLoadError",
    "UnsupportedLanguageError",
    "__version__",
]
