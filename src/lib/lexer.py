"""
Custom Pygments lexer for mdhtml sources

Provides syntax highlighting for directive-annotated Markdown when showing
mdhtml source inside a document (fenced blocks tagged ```mdhtml).

Token types:
- Keyword.Namespace: Include directives (:include:, :include*:)
- Keyword.Declaration: Metadata directives (:css:, :title:)
- Name.Decorator: Attribute directives (:id:, :class:, :style:)
- String: Directive arguments
- Operator: The '|' separating an :include*: directory from its pattern
- String.Regex: The :include*: pattern
- Generic.Heading: '#' heading lines
- Text: Everything else
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Keyword,
    Name,
    String,
    Operator,
    Comment,
    Generic,
)


class MdhtmlLexer(RegexLexer):
    """
    Lexer for mdhtml directive-annotated Markdown

    Only lines starting with a directive are treated specially; Markdown
    itself is left as plain text apart from headings.

    Example:
        :include*:chapters|^ch

    Tokens:
        :include*: → Keyword.Namespace
        chapters → String
        | → Operator
        ^ch → String.Regex
    """

    name = 'mdhtml'
    aliases = ['mdhtml']
    filenames = []

    tokens = {
        'root': [
            # HTML comments
            (r'<!--.*?-->', Comment),

            # :include*:dir|regex
            (r'^(:include\*:)([^|\n]*)(\|)(.*)$',
             bygroups(Keyword.Namespace, String, Operator, String.Regex)),

            # :include:path
            (r'^(:include:)(.*)$', bygroups(Keyword.Namespace, String)),

            # Document metadata
            (r'^(:(?:css|title):)(.*)$', bygroups(Keyword.Declaration, String)),

            # Heading attributes
            (r'^(:(?:id|style|class):)(.*)$', bygroups(Name.Decorator, String)),

            # Headings
            (r'^#+\s.*$', Generic.Heading),

            (r'[^\n]+', Text),
            (r'\n', Text),
        ],
    }
