"""
Java Syntax Extractor

Lowers a tree-sitter-java CST into declaration syntax models:
package name, class-like declarations (nested ones included), and their
fields, constructors, methods, and initializer blocks.

Types are erased to their textual form: type arguments and annotations are
dropped, qualifiers are kept as written, array dimensions become "[]"
suffixes and varargs become arrays.
"""

from pathlib import Path

try:
    from tree_sitter import Node as TSNode
except ImportError:
    TSNode = None

from ..config import Settings
from ..config import settings as default_settings
from ..exceptions import SourceParseError
from ..observability import get_logger
from ..structure.models import ElementKind
from .ast_tree import AstTree
from .source_file import SourceFile
from .syntax import (
    CompilationUnitSyntax,
    ConstructorSyntax,
    FieldSyntax,
    InitializerSyntax,
    MemberSyntax,
    MethodSyntax,
    ParameterSyntax,
    TypeDeclarationSyntax,
)

logger = get_logger(__name__)

# Java-specific Tree-sitter node types
JAVA_TYPE_DECLARATIONS = {
    "class_declaration": ElementKind.CLASS,
    "interface_declaration": ElementKind.INTERFACE,
    "enum_declaration": ElementKind.ENUM,
}

JAVA_FIELD_TYPES = {
    "field_declaration",
    "constant_declaration",  # interface constants
}

JAVA_TYPE_NODES = {
    "void_type",
    "integral_type",
    "floating_point_type",
    "boolean_type",
    "type_identifier",
    "scoped_type_identifier",
    "generic_type",
    "array_type",
    "annotated_type",
}


class JavaSyntaxExtractor:
    """
    Java parser collaborator backed by tree-sitter-java.

    Stateless between calls, so one instance may serve several threads;
    the parser registry hands each thread its own tree-sitter parser.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or default_settings

    # ============================================================
    # Entry Points
    # ============================================================

    def parse_file(self, file_path: str | Path) -> CompilationUnitSyntax:
        """
        Read and parse one Java file.

        Raises:
            SourceParseError: If the file cannot be read, decoded, or parsed
        """
        try:
            source = SourceFile.from_file(file_path, language="java", encoding=self.settings.source_encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceParseError(str(file_path), str(e)) from e

        return self.parse_source(source)

    def parse_source(self, source: SourceFile) -> CompilationUnitSyntax:
        """
        Parse an in-memory Java source.

        Raises:
            SourceParseError: If strict parsing is enabled and the tree has errors
        """
        ast = AstTree.parse(source)

        if self.settings.strict_parse and ast.has_error():
            errors = ast.get_errors()
            line = errors[0].start_point[0] + 1 if errors else -1
            raise SourceParseError(source.file_path, f"syntax error near line {line}")

        package_name = self._extract_package_name(ast)
        declarations = tuple(
            self._extract_type_declaration(ast, node) for node in ast.find_by_types(set(JAVA_TYPE_DECLARATIONS))
        )

        logger.debug(
            "java_source_extracted",
            file_path=source.file_path,
            package=package_name,
            type_declarations=len(declarations),
        )

        return CompilationUnitSyntax(
            file_path=source.file_path,
            package_name=package_name,
            type_declarations=declarations,
        )

    # ============================================================
    # Declarations
    # ============================================================

    def _extract_package_name(self, ast: AstTree) -> str:
        for child in ast.root.named_children:
            if child.type != "package_declaration":
                continue
            for part in child.named_children:
                if part.type in ("identifier", "scoped_identifier"):
                    return "".join(ast.get_text(part).split())
        return ""

    def _extract_type_declaration(self, ast: AstTree, node: TSNode) -> TypeDeclarationSyntax:
        start_line, end_line = ast.get_line_range(node)

        return TypeDeclarationSyntax(
            name=self._name_of(ast, node),
            kind=JAVA_TYPE_DECLARATIONS[node.type],
            start_line=start_line,
            end_line=end_line,
            members=tuple(self._extract_members(ast, node)),
        )

    def _member_nodes(self, body: TSNode | None) -> list[TSNode]:
        """Direct member nodes of a class/interface/enum body."""
        if body is None:
            return []
        if body.type != "enum_body":
            return list(body.named_children)

        # enum members live after the constants, in enum_body_declarations
        members: list[TSNode] = []
        for child in body.named_children:
            if child.type == "enum_body_declarations":
                members.extend(child.named_children)
        return members

    def _extract_members(self, ast: AstTree, node: TSNode) -> list[MemberSyntax]:
        members: list[MemberSyntax] = []

        for member in self._member_nodes(node.child_by_field_name("body")):
            if member.type in JAVA_FIELD_TYPES:
                members.extend(self._extract_fields(ast, member))
            elif member.type == "constructor_declaration":
                members.append(self._extract_constructor(ast, member))
            elif member.type == "method_declaration":
                members.append(self._extract_method(ast, member))
            elif member.type == "static_initializer":
                members.append(InitializerSyntax(*ast.get_line_range(member)))

        return members

    # ============================================================
    # Members
    # ============================================================

    def _extract_fields(self, ast: AstTree, node: TSNode) -> list[FieldSyntax]:
        """
        Extract fields, splitting the declaration wherever the erased type changes.

        `int a, b[];` declares an int and an int[], so it yields two entries
        sharing the declaration's line range. Name order is preserved.
        """
        start_line, end_line = ast.get_line_range(node)
        base_type = self.erase_type(ast, node.child_by_field_name("type"))

        runs: list[tuple[str, list[str]]] = []
        for declarator in node.children_by_field_name("declarator"):
            name_node = declarator.child_by_field_name("name")
            if name_node is None:
                continue
            field_type = base_type + self._dimensions(ast, declarator.child_by_field_name("dimensions"))
            if runs and runs[-1][0] == field_type:
                runs[-1][1].append(ast.get_text(name_node))
            else:
                runs.append((field_type, [ast.get_text(name_node)]))

        return [
            FieldSyntax(type=field_type, names=tuple(names), start_line=start_line, end_line=end_line)
            for field_type, names in runs
        ]

    def _extract_constructor(self, ast: AstTree, node: TSNode) -> ConstructorSyntax:
        start_line, end_line = ast.get_line_range(node)
        return ConstructorSyntax(
            name=self._name_of(ast, node),
            parameters=self._extract_parameters(ast, node.child_by_field_name("parameters")),
            start_line=start_line,
            end_line=end_line,
        )

    def _extract_method(self, ast: AstTree, node: TSNode) -> MethodSyntax:
        start_line, end_line = ast.get_line_range(node)
        return_type = self.erase_type(ast, node.child_by_field_name("type"))
        # legacy `int values()[]` form
        return_type += self._dimensions(ast, node.child_by_field_name("dimensions"))

        return MethodSyntax(
            name=self._name_of(ast, node),
            return_type=return_type,
            parameters=self._extract_parameters(ast, node.child_by_field_name("parameters")),
            start_line=start_line,
            end_line=end_line,
        )

    def _extract_parameters(self, ast: AstTree, node: TSNode | None) -> tuple[ParameterSyntax, ...]:
        if node is None:
            return ()

        params: list[ParameterSyntax] = []
        for child in node.named_children:
            if child.type == "formal_parameter":
                param_type = self.erase_type(ast, child.child_by_field_name("type"))
                param_type += self._dimensions(ast, child.child_by_field_name("dimensions"))
                params.append(ParameterSyntax(self._name_of(ast, child), param_type))
            elif child.type == "spread_parameter":
                params.append(self._extract_spread_parameter(ast, child))
            # receiver parameters (`Foo this`) are not real parameters

        return tuple(params)

    def _extract_spread_parameter(self, ast: AstTree, node: TSNode) -> ParameterSyntax:
        """`String... args` becomes args:String[]."""
        type_node = next((c for c in node.named_children if c.type in JAVA_TYPE_NODES), None)
        declarator = next((c for c in node.named_children if c.type == "variable_declarator"), None)

        # older grammars wrap the name in a variable_declarator, newer ones inline it
        holder = declarator if declarator is not None else node
        name_node = holder.child_by_field_name("name")
        if name_node is None:
            name_node = next((c for c in holder.named_children if c.type == "identifier"), None)

        name = ast.get_text(name_node) if name_node is not None else ""
        extra = self._dimensions(ast, holder.child_by_field_name("dimensions"))

        return ParameterSyntax(name, self.erase_type(ast, type_node) + "[]" + extra)

    # ============================================================
    # Type Erasure
    # ============================================================

    def erase_type(self, ast: AstTree, node: TSNode | None) -> str:
        """
        Erase a type node to its textual form.

        Examples:
            List<String>              -> List
            java.util.Map<K, V>[]     -> java.util.Map[]
            @NonNull String           -> String
            Outer<T>.Inner<U>         -> Outer.Inner
        """
        if node is None:
            return ""

        if node.type == "generic_type":
            base = next((c for c in node.named_children if c.type != "type_arguments"), None)
            return self.erase_type(ast, base)

        if node.type == "array_type":
            element = self.erase_type(ast, node.child_by_field_name("element"))
            return element + self._dimensions(ast, node.child_by_field_name("dimensions"))

        if node.type == "annotated_type":
            inner = [c for c in node.named_children if c.type in JAVA_TYPE_NODES]
            return self.erase_type(ast, inner[-1]) if inner else ""

        if node.type == "scoped_type_identifier":
            parts = [self.erase_type(ast, c) for c in node.named_children if c.type in JAVA_TYPE_NODES]
            return ".".join(parts)

        return "".join(ast.get_text(node).split())

    def _dimensions(self, ast: AstTree, node: TSNode | None) -> str:
        if node is None:
            return ""
        return "[]" * ast.get_text(node).count("[")

    def _name_of(self, ast: AstTree, node: TSNode) -> str:
        name_node = node.child_by_field_name("name")
        return ast.get_text(name_node) if name_node is not None else ""
