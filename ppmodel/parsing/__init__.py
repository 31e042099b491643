"""
Parsing Layer

Tree-sitter based Java front end.

Components:
- parser_registry: Language parser management (per-thread parsers)
- source_file: Source file representation
- ast_tree: AST tree wrapper with convenient traversal methods
- syntax: Parser-neutral declaration models consumed by the loader
- java_extractor: tree-sitter-java CST → declaration models
"""

from .ast_tree import AstTree
from .java_extractor import JavaSyntaxExtractor
from .parser_registry import ParserRegistry, get_registry
from .source_file import SourceFile
from .syntax import (
    VOID_TYPE,
    CompilationUnitSyntax,
    ConstructorSyntax,
    FieldSyntax,
    InitializerSyntax,
    MemberSyntax,
    MethodSyntax,
    ParameterSyntax,
    SourceParser,
    TypeDeclarationSyntax,
)

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceFile",
    "AstTree",
    "JavaSyntaxExtractor",
    # Syntax models
    "CompilationUnitSyntax",
    "TypeDeclarationSyntax",
    "FieldSyntax",
    "MethodSyntax",
    "ConstructorSyntax",
    "InitializerSyntax",
    "ParameterSyntax",
    "MemberSyntax",
    "SourceParser",
    "VOID_TYPE",
]
