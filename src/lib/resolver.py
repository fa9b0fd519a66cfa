"""
Directive resolver for mdhtml

Flattens a directive-annotated Markdown tree into a single stream of lines.

The resolver walks the include graph depth first:
1. Reading: each file is read whole and split into lines (CRLF tolerated)
2. Classification: each line is classified once by the DirectiveRegistry
3. Dispatch: includes recurse, metadata directives update the call's
   ResolutionContext, everything else is emitted as content

Key features:
- Include paths resolve relative to the including file
- :include*: pulls in a whole directory, filtered by regex, in natural order
- Stylesheets are deduplicated across the whole tree
- The root document's :title: wins over included ones
- Include cycles are reported instead of recursing forever

Example:
    >>> resolver = Resolver()
    >>> doc = resolver.resolve("guide.md")
    >>> doc.title, doc.css
    ('User Guide', ['theme.css'])
"""

import os
import re
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional, Union

from ..config import appsettings, AppSettings
from ..models.directives import DirectiveKind, DirectiveLine
from ..models.document import ResolutionContext, ResolvedDocument
from .directives import DirectiveRegistry, includeGlob_split
from .errors import DirectiveError, LineTooLongError, SourceIOError
from .log import LOG
from .natsort import names_sortNatural

Reader = Callable[[Path], str]
PathLike = Union[str, "os.PathLike[str]"]


def file_read(path: Path) -> str:
    """Default reader: the whole file as UTF-8 text"""
    return path.read_text(encoding="utf-8")


def lines_split(text: str) -> List[str]:
    """
    Split text on '\\n', dropping one trailing '\\r' per line.

    A final newline does not produce a trailing empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def path_join(directory: PathLike, relative: str) -> str:
    """Join and lexically normalise a path, like filepath.Join"""
    return os.path.normpath(os.path.join(os.fspath(directory), relative))


class Resolver:
    """
    Resolves include, css, title and attribute directives

    A Resolver holds configuration only; every call to resolve() builds a
    fresh ResolutionContext, so one instance can serve many conversions.
    """

    def __init__(
        self,
        attributes: bool = False,
        reader: Optional[Reader] = None,
        settings: Optional[AppSettings] = None,
        line_limit: bool = True,
    ) -> None:
        """
        Initialize resolver

        Args:
            attributes: Honour :id:/:style:/:class: directives (headings variant)
            reader: Callable returning the text of a path. Defaults to file_read.
            settings: Configuration; defaults to the module-level appsettings
            line_limit: Enforce settings.max_line_size on every source line
        """
        self.settings = settings or appsettings
        self.registry = DirectiveRegistry(attributes=attributes)
        self.reader: Reader = reader or file_read
        self.max_line_size: Optional[int] = self.settings.max_line_size if line_limit else None

    def resolve(self, path: PathLike) -> ResolvedDocument:
        """
        Resolve a root document and everything it includes

        Args:
            path: Path to the root Markdown file

        Returns:
            ResolvedDocument with lines, title and css list

        Raises:
            SourceIOError: If any file cannot be read, or a line is too long
            DirectiveError: On a malformed :include*:, a bad regex, or a cycle
        """
        context = ResolutionContext()
        self.file_resolve(os.path.normpath(os.fspath(path)), context, frozenset())
        LOG(f"Resolved {path}: {len(context.lines)} lines, {len(context.css)} stylesheets", level=2)
        return context.document_make()

    def text_resolve(self, text: str, base_dir: PathLike = ".", name: str = "<string>") -> ResolvedDocument:
        """
        Resolve in-memory source as if it were a root document in base_dir

        Args:
            text: Markdown source
            base_dir: Directory relative include/css paths are resolved from
            name: Name used in error messages
        """
        context = ResolutionContext()
        self.lines_resolve(lines_split(text), name, os.fspath(base_dir), context, frozenset())
        return context.document_make()

    def file_resolve(self, path: str, context: ResolutionContext, open_paths: FrozenSet[str]) -> None:
        """Read one file and resolve its lines into the context"""
        key = os.path.abspath(path)
        if key in open_paths:
            raise DirectiveError(f"include cycle detected: {path} is already being included", path=path)
        try:
            text = self.reader(Path(path))
        except OSError as e:
            raise SourceIOError(f"unable to read {path}: {e.strerror or e}", path) from e
        except UnicodeDecodeError as e:
            raise SourceIOError(f"unable to decode {path}: {e}", path) from e
        LOG(f"Reading {path} (depth {context.depth})", level=3)
        self.lines_resolve(lines_split(text), path, os.path.dirname(path), context, open_paths | {key})

    def lines_resolve(
        self,
        lines: List[str],
        path: str,
        directory: str,
        context: ResolutionContext,
        open_paths: FrozenSet[str],
    ) -> None:
        """
        Resolve the lines of one document

        Args:
            lines: Source lines, already split
            path: Document path (for messages)
            directory: Directory relative paths are resolved against
            context: Accumulator for the current call
            open_paths: Absolute paths on the current include chain
        """
        for line_number, line in enumerate(lines, start=1):
            if self.max_line_size is not None and len(line.encode("utf-8")) > self.max_line_size:
                raise LineTooLongError(path, line_number, self.max_line_size)
            self.line_dispatch(self.registry.line_classify(line), path, directory, context, open_paths)

    def line_dispatch(
        self,
        directive: DirectiveLine,
        path: str,
        directory: str,
        context: ResolutionContext,
        open_paths: FrozenSet[str],
    ) -> None:
        """Apply a single classified line to the context"""
        kind = directive.kind
        if kind == DirectiveKind.INCLUDE:
            context.depth += 1
            self.file_resolve(path_join(directory, directive.value), context, open_paths)
            context.depth -= 1
        elif kind == DirectiveKind.INCLUDE_GLOB:
            target, pattern = includeGlob_split(directive.value, path)
            context.depth += 1
            self.glob_resolve(path_join(directory, target), pattern, path, context, open_paths)
            context.depth -= 1
        elif kind == DirectiveKind.CSS:
            css = path_join(directory, directive.value)
            if context.css_add(css):
                LOG(f"Stylesheet {css}", level=3)
        elif kind == DirectiveKind.TITLE:
            context.title_offer(directive.value)
        elif directive.spec is not None and directive.spec.attribute:
            attribute = directive.spec.attribute
            separator = directive.spec.separator
            if separator is not None and attribute in context.pending:
                context.pending[attribute] = context.pending[attribute] + separator + directive.value
            else:
                context.pending[attribute] = directive.value
        elif kind == DirectiveKind.BLANK:
            context.blank_emit()
        else:
            context.line_emit(directive.value)

    def glob_resolve(
        self,
        directory: str,
        pattern: str,
        path: str,
        context: ResolutionContext,
        open_paths: FrozenSet[str],
    ) -> None:
        """
        Resolve every matching .md file in a directory

        Args:
            directory: Directory to scan
            pattern: Regex that file names must match (re.search semantics)
            path: File holding the directive, for messages
        """
        try:
            regex = re.compile(pattern)
        except re.error as e:
            raise DirectiveError(
                f"invalid :include*: pattern {pattern!r} in {path}: {e}",
                path=path,
                directive=f":include*:{pattern}",
            ) from e
        try:
            with os.scandir(directory) as entries:
                names = [
                    entry.name
                    for entry in entries
                    if not entry.is_dir()
                    and entry.name.lower().endswith(".md")
                    and regex.search(entry.name)
                ]
        except OSError as e:
            raise SourceIOError(f"unable to list {directory}: {e.strerror or e}", directory) from e
        names = names_sortNatural(names)
        LOG(f"{directory}|{pattern} matched {len(names)} files", level=2)
        for name in names:
            self.file_resolve(os.path.join(directory, name), context, open_paths)
