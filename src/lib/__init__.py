"""
mdhtml - directive-aware Markdown to HTML compiler

Resolves :include:, :css:, :title: and heading attribute directives, then
renders a single standalone HTML document.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .resolver import Resolver
from .converter import Converter, Variant, markdown_toHTML
from .directives import DirectiveRegistry
from .errors import MdhtmlError, SourceIOError, DirectiveError, RenderError
from .log import LOG, WARN, state_connectToLogger

__all__ = [
    "Resolver",
    "Converter",
    "Variant",
    "markdown_toHTML",
    "DirectiveRegistry",
    "MdhtmlError",
    "SourceIOError",
    "DirectiveError",
    "RenderError",
    "LOG",
    "WARN",
    "state_connectToLogger",
    "__version__",
]
