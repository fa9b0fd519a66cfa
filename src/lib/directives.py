"""
Directive registry for mdhtml

Holds the DirectiveSpecs in priority order and classifies raw source lines
into DirectiveLine values, so the rest of the pipeline branches on a kind
instead of re-scanning prefixes.
"""

from typing import List, Optional, Tuple

from ..models.directives import DirectiveSpec, DirectiveKind, DirectiveLine
from .errors import DirectiveError


class DirectiveRegistry:
    """
    Registry of directive specifications

    Specs are tried in registration order and the first match wins, so
    ':include*:' must be registered before ':include:'.
    """

    def __init__(self, attributes: bool = True) -> None:
        """
        Initialize the directive registry

        Args:
            attributes: Register the :id:/:style:/:class: directives. When
                        False those lines are treated as ordinary content.
        """
        self.specs: List[DirectiveSpec] = []
        self.attributes = attributes
        self.structureDirectives_register()
        self.metadataDirectives_register()
        if attributes:
            self.attributeDirectives_register()

    def register(self, spec: DirectiveSpec) -> None:
        """Register a directive specification"""
        self.specs.append(spec)

    def spec_get(self, kind: DirectiveKind) -> Optional[DirectiveSpec]:
        """Get the directive specification for a kind"""
        for spec in self.specs:
            if spec.kind == kind:
                return spec
        return None

    def line_classify(self, line: str) -> DirectiveLine:
        """
        Classify a single source line

        Args:
            line: Raw line, without its line terminator

        Returns:
            DirectiveLine for the first matching directive, else BLANK for
            empty/whitespace-only lines, else CONTENT

        Example:
            >>> DirectiveRegistry().line_classify(':title:Guide').value
            'Guide'
        """
        for spec in self.specs:
            if spec.matches(line):
                return DirectiveLine(kind=spec.kind, value=spec.value_extract(line), spec=spec)
        if not line.strip():
            return DirectiveLine(kind=DirectiveKind.BLANK, value="")
        return DirectiveLine(kind=DirectiveKind.CONTENT, value=line)

    def structureDirectives_register(self) -> None:
        """Register the include directives"""
        self.register(DirectiveSpec(
            prefix=":include*:",
            kind=DirectiveKind.INCLUDE_GLOB,
            description="Include every .md file in a directory whose name matches a regex, "
                        "in natural sort order",
            examples=[":include*:chapters|^ch"],
        ))
        self.register(DirectiveSpec(
            prefix=":include:",
            kind=DirectiveKind.INCLUDE,
            description="Include another Markdown file, relative to the current one",
            examples=[":include:intro.md"],
        ))

    def metadataDirectives_register(self) -> None:
        """Register document metadata directives"""
        self.register(DirectiveSpec(
            prefix=":css:",
            kind=DirectiveKind.CSS,
            description="Link a stylesheet in the document head",
            examples=[":css:style.css"],
        ))
        self.register(DirectiveSpec(
            prefix=":title:",
            kind=DirectiveKind.TITLE,
            description="Set the document title; the root document takes precedence",
            examples=[":title:User Guide"],
        ))

    def attributeDirectives_register(self) -> None:
        """Register per-block attribute directives"""
        self.register(DirectiveSpec(
            prefix=":id:",
            kind=DirectiveKind.ID,
            description="Set the id of the next heading",
            attribute="id",
            examples=[":id:intro"],
        ))
        self.register(DirectiveSpec(
            prefix=":style:",
            kind=DirectiveKind.STYLE,
            description="Add inline style to the next heading",
            attribute="style",
            separator="; ",
            examples=[":style:color: red"],
        ))
        self.register(DirectiveSpec(
            prefix=":class:",
            kind=DirectiveKind.CLASS,
            description="Add a class to the next heading",
            attribute="class",
            separator=" ",
            examples=[":class:big"],
        ))


def includeGlob_split(value: str, path: Optional[str] = None) -> Tuple[str, str]:
    """
    Split an :include*: argument into its directory and pattern halves.

    Args:
        value: Argument text after ':include*:' (e.g. 'chapters|^ch')
        path: File containing the directive, for error messages

    Returns:
        (directory, pattern)

    Raises:
        DirectiveError: If the '|' separator is missing
    """
    directory, sep, pattern = value.partition("|")
    if not sep:
        raise DirectiveError(
            f"invalid :include*: directive: :include*:{value}"
            + (f" (in {path})" if path else ""),
            path=path,
            directive=":include*:" + value,
        )
    return directory, pattern
