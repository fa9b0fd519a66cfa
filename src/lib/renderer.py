"""
Markdown renderers

A renderer is any callable taking Markdown text and returning an HTML body
fragment. The converter receives one by injection, so the resolver and
assembler can be exercised without any particular engine.

MarkdownRenderer wraps Python-Markdown with:
- extra: tables, fenced code, footnotes, attribute lists, definition lists
- toc: automatic heading ids
- smarty: typographic quotes and dashes
- sane_lists
- codehilite: Pygments highlighting via CSS classes
- TextReplacerExtension: superscript and fraction shorthands
"""

import re
from typing import Any, Callable, Dict, List, Optional

import markdown
from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor

from ..config import appsettings, AppSettings
from .errors import RenderError
from .log import LOG

Renderer = Callable[[str], str]

TEXT_REPLACEMENTS: Dict[str, str] = {
    "^1^": "&sup1;",
    "^2^": "&sup2;",
    "^3^": "&sup3;",
    "!1/2!": "&frac12;",
    "!1/3!": "&frac13;",
    "!1/4!": "&frac14;",
    "!1/5!": "&frac15;",
    "!1/6!": "&frac16;",
    "!1/8!": "&frac18;",
    "!2/3!": "&frac23;",
    "!2/5!": "&frac25;",
    "!3/4!": "&frac34;",
    "!3/5!": "&frac35;",
    "!3/8!": "&frac38;",
    "!4/5!": "&frac45;",
    "!5/6!": "&frac56;",
    "!5/8!": "&frac58;",
    "!7/8!": "&frac78;",
}


class TextReplacerProcessor(InlineProcessor):
    """Replace literal shorthands with stashed HTML entities"""

    def __init__(self, replacements: Dict[str, str], md: Any) -> None:
        pattern = "|".join(
            re.escape(key) for key in sorted(replacements, key=len, reverse=True)
        )
        super().__init__(f"({pattern})", md)
        self.replacements = replacements

    def handleMatch(self, m, data):  # type: ignore[override]
        placeholder = self.md.htmlStash.store(self.replacements[m.group(1)])
        return placeholder, m.start(0), m.end(0)


class TextReplacerExtension(Extension):
    """
    Python-Markdown extension for superscript/fraction shorthands

    '^2^' becomes '&sup2;' and '!3/4!' becomes '&frac34;'. Code spans and
    code blocks are left alone.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.config = {
            "replacements": [dict(TEXT_REPLACEMENTS), "Mapping of literal text to HTML"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        replacements = self.getConfig("replacements")
        if replacements:
            md.inlinePatterns.register(TextReplacerProcessor(replacements, md), "mdhtml_replace", 15)


class MarkdownRenderer:
    """
    Renders Markdown with Python-Markdown

    A fresh Markdown instance is built for every call, so one renderer may
    be shared between threads.
    """

    def __init__(
        self,
        extensions: Optional[List[str]] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Args:
            extensions: Python-Markdown extension names; defaults to settings
            settings: Configuration; defaults to the module-level appsettings
        """
        settings = settings or appsettings
        self.extensions = list(extensions if extensions is not None else settings.markdown_extensions)
        self.extension_configs: Dict[str, Dict[str, Any]] = {
            "codehilite": {"guess_lang": False, "css_class": "highlight"},
        }

    def markdown_make(self) -> markdown.Markdown:
        configs = {k: v for k, v in self.extension_configs.items() if k in self.extensions}
        return markdown.Markdown(
            extensions=self.extensions + [TextReplacerExtension()],
            extension_configs=configs,
            output_format="html",
        )

    def __call__(self, text: str) -> str:
        LOG(f"Rendering {len(text)} characters of Markdown", level=3)
        try:
            body = self.markdown_make().convert(text)
        except Exception as e:
            raise RenderError(f"markdown rendering failed: {e}") from e
        return body + "\n" if body else body


def passthrough_render(text: str) -> str:
    """Identity renderer: emit the text as-is"""
    return text
