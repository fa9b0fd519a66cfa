"""
HTML document assembler

Wraps a rendered body in the standalone HTML5 skeleton: doctype, head with
meta tags, escaped title and stylesheet links, then the body.
"""

import html
from typing import Iterable, Optional


def htmlPrefix_build(title: Optional[str], css: Iterable[str], lang: str = "en") -> str:
    """
    Build everything up to and including the opening <body> tag

    Args:
        title: Document title; HTML-escaped before insertion
        css: Stylesheet paths, inserted verbatim in the given order
        lang: Value of the <html> lang attribute
    """
    parts = [
        "<!doctype html>\n",
        f'<html lang="{lang}">\n',
        "<head>\n",
        '\t<meta charset="utf-8">\n',
        '\t<meta http-equiv="x-ua-compatible" content="ie=edge">\n',
        '\t<meta name="viewport" content="width=device-width, initial-scale=1.0">\n',
        f"\t<title>{html.escape(title or '')}</title>\n",
    ]
    for href in css:
        parts.append(f'\t<link rel="stylesheet" type="text/css" href="{href}">\n')
    parts.append("</head>\n<body>\n")
    return "".join(parts)


def htmlPostfix_build() -> str:
    return "</body>\n</html>\n"


def htmlDocument_build(body: str, title: Optional[str], css: Iterable[str], lang: str = "en") -> str:
    """
    Build complete HTML document

    Args:
        body: Rendered body content
        title: Document title (None renders an empty <title>)
        css: Stylesheet paths

    Returns:
        Complete HTML document
    """
    return htmlPrefix_build(title, css, lang) + body + htmlPostfix_build()


def assemble(body: str, title: Optional[str], css: Iterable[str], lang: str = "en") -> bytes:
    """Build the complete document and encode it as UTF-8"""
    return htmlDocument_build(body, title, css, lang).encode("utf-8")
