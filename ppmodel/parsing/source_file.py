"""
Source File representation
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class SourceFile:
    """
    Represents a source code file.

    Attributes:
        file_path: Path as given by the caller (used verbatim in element IDs)
        content: File content as string
        language: Programming language
        encoding: File encoding (default: utf-8)
    """

    file_path: str
    content: str
    language: str
    encoding: str = "utf-8"

    @classmethod
    def from_file(
        cls,
        file_path: str | Path,
        language: str | None = None,
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """
        Load source file from disk.

        Args:
            file_path: Path to file
            language: Language override (auto-detected if None, falling back to java)
            encoding: File encoding

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the content is not valid for the encoding
        """
        path = Path(file_path)
        content = path.read_text(encoding=encoding)

        if language is None:
            from .parser_registry import get_registry

            language = get_registry().detect_language(path) or "java"

        return cls(
            file_path=str(file_path),
            content=content,
            language=language,
            encoding=encoding,
        )

    @classmethod
    def from_content(
        cls,
        file_path: str,
        content: str,
        language: str = "java",
        encoding: str = "utf-8",
    ) -> "SourceFile":
        """Create source file from content string."""
        return cls(
            file_path=file_path,
            content=content,
            language=language,
            encoding=encoding,
        )
