"""
Heading attribute renderer

Turns '#' heading lines that open a block into explicit <hN> tags carrying
the id/class/style gathered by attribute directives. Every other line is
passed through untouched.
"""

import re
from typing import Dict, Iterable, List

from ..models.directives import ATTRIBUTE_ORDER
from ..models.document import ResolvedLine

HEADING_PREFIX = re.compile(r"^(#+)\s", re.ASCII)


def attributes_format(attributes: Dict[str, str]) -> str:
    """
    Format attributes in id, class, style order, skipping empty values.

    Values are inserted verbatim.

    Example:
        >>> attributes_format({'class': 'big', 'id': 'intro'})
        ' id="intro" class="big"'
    """
    return "".join(
        f' {name}="{attributes[name]}"'
        for name in ATTRIBUTE_ORDER
        if attributes.get(name)
    )


def heading_render(text: str, attributes: Dict[str, str]) -> str:
    """
    Render one heading line as an explicit tag.

    Args:
        text: Line starting with one or more '#' and a whitespace character
        attributes: Attribute map attached to the line

    Example:
        >>> heading_render('## Setup', {'id': 'setup'})
        '<h2 id="setup">Setup</h2>'
    """
    match = HEADING_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a heading line: {text!r}")
    level = len(match.group(1))
    body = text[match.end():]
    return f"<h{level}{attributes_format(attributes)}>{body}</h{level}>"


def headings_render(lines: Iterable[ResolvedLine]) -> List[str]:
    """
    Apply heading rendering to a resolved line stream

    A line is rendered as a heading only when it matches '^#+\\s' and is
    either the first line or directly follows an empty line.

    Returns:
        Output lines, one per input line
    """
    output: List[str] = []
    previous = None
    for line in lines:
        if HEADING_PREFIX.match(line.text) and (previous is None or previous == ""):
            output.append(heading_render(line.text, line.attributes))
        else:
            output.append(line.text)
        previous = line.text
    return output
