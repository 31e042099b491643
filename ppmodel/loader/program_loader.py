"""
Program Loader

Builds a Program from a list of source files:

1. Filter out paths that are not regular readable files (silently)
2. Parse each file through the parser collaborator (fail-fast)
3. Resolve one PackageElement per package name for the whole load
4. Create class/interface/enum elements and their fields, constructors, methods
5. Synthesize entry/exit program points with visible-variable snapshots
"""

import os
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from ..config import Settings
from ..config import settings as default_settings
from ..exceptions import ProgramLoadError, SourceParseError
from ..observability import get_logger
from ..parsing.syntax import (
    CompilationUnitSyntax,
    ConstructorSyntax,
    FieldSyntax,
    InitializerSyntax,
    MethodSyntax,
    ParameterSyntax,
    SourceParser,
    TypeDeclarationSyntax,
)
from ..points.models import ProgramPoint, ProgramPointKind, VariableInfo
from ..structure.models import (
    ClassElement,
    ConstructorElement,
    FieldElement,
    MethodElement,
    PackageElement,
    StaticBlockElement,
)
from ..structure.program import Program

logger = get_logger(__name__)

RETURN_VARIABLE = "return"


class ProgramLoader:
    """
    Loads a Program model from source files.

    The package memo lives for one load() call only, so a loader can be
    reused without two programs ever sharing a package node.
    """

    def __init__(self, parser: SourceParser | None = None, settings: Settings | None = None):
        """
        Initialize loader.

        Args:
            parser: Parser collaborator (defaults to the tree-sitter Java extractor)
            settings: Settings override (defaults to global settings)
        """
        self.settings = settings or default_settings

        if parser is None:
            from ..parsing.java_extractor import JavaSyntaxExtractor

            parser = JavaSyntaxExtractor(self.settings)
        self.parser = parser

    # ============================================================
    # Loading
    # ============================================================

    def load(self, program_name: str, source_files: Sequence[str | Path]) -> Program:
        """
        Load a program model from source files, in list order.

        Args:
            program_name: Name of the resulting program
            source_files: Paths to source files; non-regular or unreadable paths are skipped

        Returns:
            Fully built Program

        Raises:
            ProgramLoadError: If any file fails to parse (no partial program is returned)
        """
        files = [str(path) for path in source_files if self._is_loadable(path)]
        logger.info(
            "program_load_started",
            program=program_name,
            requested=len(source_files),
            loadable=len(files),
            workers=self.settings.parse_workers,
        )

        program = Program(program_name)
        package_cache: dict[str, PackageElement] = {}

        for file_path, unit in self._parse_all(files):
            self._load_unit(program, package_cache, file_path, unit)

        logger.info(
            "program_loaded",
            program=program_name,
            files=len(files),
            packages=len(package_cache),
            elements=len(program.get_all_elements()),
            program_points=len(program.get_all_program_points()),
        )
        return program

    def _is_loadable(self, path: str | Path) -> bool:
        """Regular, readable file check. Anything else is filtered out, not an error."""
        if Path(path).is_file() and os.access(path, os.R_OK):
            return True
        logger.debug("source_file_skipped", file_path=str(path))
        return False

    def _parse_all(self, files: list[str]) -> Iterator[tuple[str, CompilationUnitSyntax]]:
        """
        Yield (file_path, syntax) in file-list order.

        With parse_workers > 1 files are parsed on a thread pool, but results
        are still consumed in list order, so the first failure reported is the
        earliest failing file.
        """
        if self.settings.parse_workers <= 1 or len(files) <= 1:
            for file_path in files:
                yield file_path, self._parse(file_path)
            return

        executor = ThreadPoolExecutor(max_workers=self.settings.parse_workers)
        try:
            yield from zip(files, executor.map(self._parse, files))
        finally:
            executor.shutdown(wait=True, cancel_futures=True)

    def _parse(self, file_path: str) -> CompilationUnitSyntax:
        try:
            return self.parser.parse_file(file_path)
        except SourceParseError as e:
            logger.error("source_parse_failed", file_path=file_path, reason=e.reason)
            raise ProgramLoadError(file_path, e.reason or "parse failed") from e
        except (OSError, UnicodeError, ValueError) as e:
            reason = f"{type(e).__name__}: {e}"
            logger.error("source_parse_failed", file_path=file_path, reason=reason)
            raise ProgramLoadError(file_path, reason) from e

    # ============================================================
    # Model Building
    # ============================================================

    def _load_unit(
        self,
        program: Program,
        package_cache: dict[str, PackageElement],
        file_path: str,
        unit: CompilationUnitSyntax,
    ) -> None:
        package = package_cache.get(unit.package_name)
        if package is None:
            package = PackageElement(unit.package_name)
            package_cache[unit.package_name] = package
            program.add_top_level_element(package)

        for declaration in unit.type_declarations:
            self._create_class_like(declaration, package, file_path)

        logger.debug(
            "source_file_loaded",
            file_path=file_path,
            package=unit.package_name,
            type_declarations=len(unit.type_declarations),
        )

    def _create_class_like(
        self,
        declaration: TypeDeclarationSyntax,
        package: PackageElement,
        file_path: str,
    ) -> ClassElement:
        """Create a class/interface/enum element and its members."""
        cls = ClassElement(
            declaration.name,
            package,
            file_path,
            declaration.start_line,
            declaration.end_line,
            kind=declaration.kind,
        )

        static_blocks: list[InitializerSyntax] = []
        for member in declaration.members:
            if isinstance(member, FieldSyntax):
                self._create_fields(member, cls, file_path)
            elif isinstance(member, ConstructorSyntax):
                self._create_constructor(member, cls, file_path)
            elif isinstance(member, MethodSyntax):
                self._create_method(member, cls, file_path)
            elif isinstance(member, InitializerSyntax):
                static_blocks.append(member)

        if static_blocks and self.settings.include_static_blocks:
            self._create_static_block(static_blocks, cls, file_path)

        return cls

    def _create_fields(self, field: FieldSyntax, parent: ClassElement, file_path: str) -> None:
        """One FieldElement per declared name, all sharing the declaration's type and lines."""
        for name in field.names:
            FieldElement(name, field.type, parent, file_path, field.start_line, field.end_line)

    def _create_constructor(self, ctor: ConstructorSyntax, parent: ClassElement, file_path: str) -> None:
        element = ConstructorElement(
            ctor.name,
            [param.type for param in ctor.parameters],
            parent,
            file_path,
            ctor.start_line,
            ctor.end_line,
        )

        params = self._parameter_variables(ctor.parameters)
        element.add_program_point(
            ProgramPoint(element, ProgramPointKind.CONSTRUCTOR_ENTRY, ctor.start_line, params)
        )
        # constructors exit through METHOD_EXIT and have no return value
        element.add_program_point(ProgramPoint(element, ProgramPointKind.METHOD_EXIT, ctor.end_line, params))

    def _create_method(self, method: MethodSyntax, parent: ClassElement, file_path: str) -> None:
        element = MethodElement(
            method.name,
            method.return_type,
            [param.type for param in method.parameters],
            parent,
            file_path,
            method.start_line,
            method.end_line,
        )

        params = self._parameter_variables(method.parameters)
        element.add_program_point(ProgramPoint(element, ProgramPointKind.METHOD_ENTRY, method.start_line, params))

        exit_vars = list(params)
        if method.returns_value:
            exit_vars.append(VariableInfo(RETURN_VARIABLE, method.return_type))
        element.add_program_point(ProgramPoint(element, ProgramPointKind.METHOD_EXIT, method.end_line, exit_vars))

    def _create_static_block(
        self, blocks: list[InitializerSyntax], parent: ClassElement, file_path: str
    ) -> None:
        """All static initializers of a class form one class initializer."""
        start_line = blocks[0].start_line
        end_line = blocks[-1].end_line
        element = StaticBlockElement(parent, file_path, start_line, end_line)

        element.add_program_point(ProgramPoint(element, ProgramPointKind.STATIC_BLOCK_ENTRY, start_line))
        element.add_program_point(ProgramPoint(element, ProgramPointKind.STATIC_BLOCK_EXIT, end_line))

    @staticmethod
    def _parameter_variables(parameters: Sequence[ParameterSyntax]) -> list[VariableInfo]:
        return [VariableInfo(param.name, param.type) for param in parameters]
