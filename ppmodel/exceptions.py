"""
ppmodel Exceptions

Custom exceptions for the program model layer.
"""


class PPModelError(Exception):
    """Base exception for ppmodel."""

    pass


class UnsupportedLanguageError(PPModelError, ValueError):
    """No grammar is registered for the requested language."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Language not supported: {language}")


class SourceParseError(PPModelError):
    """A source file could not be turned into a syntax tree."""

    def __init__(self, file_path: str, reason: str = ""):
        self.file_path = file_path
        self.reason = reason
        msg = f"Parse failed for {file_path}"
        if reason:
            msg += f" (reason: {reason})"
        super().__init__(msg)


class ProgramLoadError(PPModelError):
    """Loading a program was aborted; no partial program is returned."""

    def __init__(self, file_path: str, reason: str = ""):
        self.file_path = file_path
        self.reason = reason
        msg = f"Program load failed at {file_path}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
