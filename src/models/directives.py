"""
Directive specification and metadata models

Defines the line-level directives understood by mdhtml and the classified
form of a source line, used by the DirectiveRegistry and the Resolver.
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import List, Optional


class DirectiveKind(Enum):
    """
    Kinds of source line

    Every line of a source document is classified as exactly one of these.
    """
    INCLUDE = "include"            # :include:path
    INCLUDE_GLOB = "include*"      # :include*:dir|regex
    CSS = "css"                    # :css:path
    TITLE = "title"                # :title:text
    ID = "id"                      # :id:value
    STYLE = "style"                # :style:value
    CLASS = "class"                # :class:value
    BLANK = "blank"                # empty or whitespace-only line
    CONTENT = "content"            # anything else


@dataclass
class DirectiveSpec:
    """
    Specification for an mdhtml directive

    Attributes:
        prefix: Literal line prefix, including both colons (e.g. ':css:')
        kind: Kind assigned to lines carrying this prefix
        description: Human-readable description
        attribute: HTML attribute fed by this directive (attribute
                   directives only)
        separator: Joiner for repeated values; None means a later value
                   replaces an earlier one
        examples: Example usage strings
    """
    prefix: str
    kind: DirectiveKind
    description: str
    attribute: Optional[str] = None
    separator: Optional[str] = None
    examples: List[str] = field(default_factory=list)

    def matches(self, line: str) -> bool:
        """Check whether a raw source line carries this directive"""
        return line.startswith(self.prefix)

    def value_extract(self, line: str) -> str:
        """Return the directive argument, i.e. the text after the prefix"""
        return line[len(self.prefix):]


@dataclass
class DirectiveLine:
    """
    A classified source line

    Attributes:
        kind: What the line is
        value: Directive argument, or the full line for CONTENT/BLANK
        spec: The matching DirectiveSpec (None for CONTENT/BLANK)

    Example:
        ':css:style.css' -> DirectiveLine(kind=CSS, value='style.css', spec=...)
    """
    kind: DirectiveKind
    value: str
    spec: Optional[DirectiveSpec] = None


# Order in which generated heading tags list their attributes
ATTRIBUTE_ORDER = ("id", "class", "style")
