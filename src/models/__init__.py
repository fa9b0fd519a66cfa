"""
Models package for mdhtml

Contains data structures and type definitions for the conversion pipeline.
"""

from .state import ProgramState, pipeline
from .directives import DirectiveSpec, DirectiveKind, DirectiveLine
from .document import ResolvedLine, ResolvedDocument, ResolutionContext

__all__ = [
    "ProgramState",
    "pipeline",
    "DirectiveSpec",
    "DirectiveKind",
    "DirectiveLine",
    "ResolvedLine",
    "ResolvedDocument",
    "ResolutionContext",
]
