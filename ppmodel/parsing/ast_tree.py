"""
AST Tree wrapper for Tree-sitter
"""

from collections.abc import Iterator

try:
    from tree_sitter import Node as TSNode
    from tree_sitter import Tree as TSTree
except ImportError as e:
    raise ImportError("tree-sitter is required. Install with: pip install tree-sitter") from e

from .parser_registry import get_registry
from .source_file import SourceFile


class AstTree:
    """
    Wrapper for Tree-sitter AST.

    Provides convenient methods for traversing and analyzing the AST.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        self.source = source
        self.tree = tree
        self._root = tree.root_node
        self._source_bytes = source.content.encode(source.encoding)

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Raises:
            UnsupportedLanguageError: If language not supported
        """
        parser = get_registry().get_parser(source.language)
        tree = parser.parse(source.content.encode(source.encoding))
        return cls(source, tree)

    @property
    def root(self) -> TSNode:
        """Get root node"""
        return self._root

    def walk(self, node: TSNode | None = None) -> Iterator[TSNode]:
        """Walk AST in depth-first pre-order."""
        if node is None:
            node = self._root

        yield node
        for child in node.children:
            yield from self.walk(child)

    def find_by_types(self, node_types: set[str] | frozenset[str], node: TSNode | None = None) -> list[TSNode]:
        """
        Find all nodes whose type is in node_types, in pre-order.

        Args:
            node_types: Node types to find (e.g., {"class_declaration"})
            node: Starting node (defaults to root)
        """
        return [n for n in self.walk(node) if n.type in node_types]

    def get_text(self, node: TSNode) -> str:
        """Get text content of a node."""
        return self._source_bytes[node.start_byte : node.end_byte].decode(self.source.encoding)

    def get_line_range(self, node: TSNode) -> tuple[int, int]:
        """
        Get (start_line, end_line) of a node.

        Tree-sitter uses 0-indexed lines; returned lines are 1-indexed, inclusive.
        """
        return node.start_point[0] + 1, node.end_point[0] + 1

    def has_error(self) -> bool:
        """Check if AST has any ERROR or MISSING node."""
        return self._root.has_error

    def get_errors(self, node: TSNode | None = None) -> list[TSNode]:
        """Get all ERROR and MISSING nodes."""
        return [n for n in self.walk(node) if n.type == "ERROR" or n.is_missing]

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
