"""
Error types raised by mdhtml

All errors derive from MdhtmlError so callers (and the CLI) can catch the
whole family in one place.
"""

from typing import Optional


class MdhtmlError(Exception):
    """Base class for all mdhtml failures"""
    pass


class SourceIOError(MdhtmlError, OSError):
    """Raised when a source file cannot be read or an output file written"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class LineTooLongError(SourceIOError):
    """Raised when a source line exceeds the configured maximum line size"""

    def __init__(self, path: str, line_number: int, limit: int):
        super().__init__(
            f"{path}:{line_number}: line exceeds maximum size of {limit} bytes", path
        )
        self.line_number = line_number
        self.limit = limit


class DirectiveError(MdhtmlError):
    """Raised for malformed :include*: directives, bad patterns and include cycles"""

    def __init__(self, message: str, path: Optional[str] = None, directive: Optional[str] = None):
        super().__init__(message)
        self.path = path
        self.directive = directive


class RenderError(MdhtmlError):
    """Raised when the Markdown renderer fails"""
    pass
