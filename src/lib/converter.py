"""
Converter: Markdown source tree to standalone HTML

Composes the resolver, the optional heading pass, a renderer and the
assembler into a single conversion.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..config import appsettings, AppSettings
from ..models.document import ResolvedDocument
from .assembler import assemble
from .errors import SourceIOError
from .headings import headings_render
from .log import LOG
from .renderer import MarkdownRenderer, Renderer, passthrough_render
from .resolver import Reader, Resolver


class Variant(Enum):
    """
    Conversion variants

    MARKDOWN: every resolved line goes through the Markdown renderer
    HEADINGS: :id:/:class:/:style: directives are honoured and block-opening
              '#' headings become explicit tags before rendering
    """
    MARKDOWN = "markdown"
    HEADINGS = "headings"


class Converter:
    """
    Converts directive-annotated Markdown to HTML

    Responsibilities:
    - Resolve includes and metadata directives
    - Render headings with attributes (HEADINGS variant)
    - Render the body through the injected renderer
    - Assemble and optionally write the final document
    """

    def __init__(
        self,
        variant: Union[Variant, str, None] = None,
        renderer: Optional[Renderer] = None,
        reader: Optional[Reader] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        """
        Initialize converter

        Args:
            variant: Conversion variant; defaults to settings.variant
            renderer: Body renderer. Defaults to MarkdownRenderer for the
                      MARKDOWN variant and passthrough_render for HEADINGS.
            reader: Source reader passed to the Resolver
            settings: Configuration; defaults to the module-level appsettings
        """
        self.settings = settings or appsettings
        self.variant = Variant(variant or self.settings.variant)
        if renderer is None:
            if self.variant == Variant.MARKDOWN:
                renderer = MarkdownRenderer(settings=self.settings)
            else:
                renderer = passthrough_render
        self.renderer = renderer
        self.resolver = Resolver(
            attributes=(self.variant == Variant.HEADINGS),
            reader=reader,
            settings=self.settings,
            line_limit=(self.variant == Variant.HEADINGS),
        )

    def document_render(self, document: ResolvedDocument) -> bytes:
        """Render and assemble an already resolved document"""
        if self.variant == Variant.HEADINGS:
            source = "".join(line + "\n" for line in headings_render(document.lines))
        else:
            source = document.text_join()
        body = self.renderer(source)
        return assemble(body, document.title, document.css, self.settings.html_lang)

    def markdown_toHTML(self, path: Union[str, "os.PathLike[str]"]) -> bytes:
        """
        Convert a Markdown file (and everything it includes) to HTML

        Args:
            path: Root Markdown file

        Returns:
            The complete HTML document as UTF-8 bytes
        """
        document = self.resolver.resolve(path)
        return self.document_render(document)

    def text_toHTML(self, text: str, base_dir: Union[str, "os.PathLike[str]"] = ".") -> bytes:
        """Convert in-memory Markdown whose relative paths start at base_dir"""
        document = self.resolver.text_resolve(text, base_dir)
        return self.document_render(document)

    def file_convert(
        self,
        source: Union[str, "os.PathLike[str]"],
        destination: Union[str, "os.PathLike[str]", None] = None,
    ) -> Dict[str, Any]:
        """
        Convert a Markdown file and write the HTML next to it (or to destination)

        Args:
            source: Root Markdown file
            destination: Output path; defaults to source with its extension
                         replaced by settings.output_extension

        Returns:
            dict with conversion results and statistics
        """
        source_path = Path(source)
        if destination is None:
            output_path = source_path.with_suffix(self.settings.output_extension)
        else:
            output_path = Path(destination)

        document = self.resolver.resolve(source_path)
        data = self.document_render(document)

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(data)
        except OSError as e:
            raise SourceIOError(f"unable to write {output_path}: {e.strerror or e}", str(output_path)) from e
        LOG(f"Wrote {output_path}", level=2)

        return {
            'status': True,
            'output_file': str(output_path),
            'title': document.title,
            'css_count': len(document.css),
            'line_count': len(document.lines),
        }


def markdown_toHTML(path: Union[str, "os.PathLike[str]"]) -> bytes:
    """
    Convert the specified Markdown file into HTML with the default settings,
    processing include, css and title directives first.
    """
    return Converter(variant=Variant.MARKDOWN).markdown_toHTML(path)
