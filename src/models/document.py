"""
Resolution data models

Type-safe structures produced and consumed while resolving a document tree.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass
class ResolvedLine:
    """
    One line of resolved content

    Attributes:
        text: Line text, verbatim (empty string for blank lines)
        attributes: Pending attribute directives attached to this line
                    (keys drawn from 'id', 'class', 'style')

    Example:
        For source ":id:intro\\n# Hello":
        ResolvedLine(text="# Hello", attributes={"id": "intro"})
    """
    text: str
    attributes: Dict[str, str] = field(default_factory=dict)


@dataclass
class ResolvedDocument:
    """
    Result of resolving a root document and everything it includes

    Attributes:
        lines: Content lines in final document order
        title: Document title, or None if no :title: directive was seen
        css: Stylesheet paths in first-seen order, without duplicates
    """
    lines: List[ResolvedLine]
    title: Optional[str]
    css: List[str]

    def text_join(self) -> str:
        """Concatenate all lines, each terminated by a newline"""
        return "".join(line.text + "\n" for line in self.lines)

    def texts(self) -> List[str]:
        return [line.text for line in self.lines]


@dataclass
class ResolutionContext:
    """
    Accumulator for a single top-level resolution call

    Created empty by Resolver.resolve() and passed down every recursive
    step; never shared between calls.

    Attributes:
        lines: Resolved lines emitted so far
        title: Title accumulated so far
        css: Ordered stylesheet list
        css_seen: Stylesheet paths already present in css
        pending: Attribute map waiting for the next content line
        depth: Current include nesting (0 for the root document)
    """
    lines: List[ResolvedLine] = field(default_factory=list)
    title: Optional[str] = None
    css: List[str] = field(default_factory=list)
    css_seen: Set[str] = field(default_factory=set)
    pending: Dict[str, str] = field(default_factory=dict)
    depth: int = 0

    def css_add(self, path: str) -> bool:
        """Append a stylesheet unless already present; return True if added"""
        if path in self.css_seen:
            return False
        self.css_seen.add(path)
        self.css.append(path)
        return True

    def title_offer(self, title: str) -> None:
        """Root-level titles always win; deeper ones only fill a gap"""
        if self.depth == 0 or not self.title:
            self.title = title

    def line_emit(self, text: str) -> None:
        """Emit a content line carrying the pending attributes"""
        self.lines.append(ResolvedLine(text=text, attributes=self.pending))
        self.pending = {}

    def blank_emit(self) -> None:
        """Emit an empty line; pending attributes are discarded"""
        self.lines.append(ResolvedLine(text=""))
        self.pending = {}

    def document_make(self) -> ResolvedDocument:
        return ResolvedDocument(lines=self.lines, title=self.title, css=self.css)
