"""
mdhtml - directive-aware Markdown to HTML compiler

Turns a tree of Markdown files stitched together with :include: directives
into one standalone HTML page.
"""

__version__ = "1.0.0"
__author__ = "Rudolph Pienaar"
__email__ = "rudolph.pienaar@gmail.com"

from .lib import Resolver, Converter, Variant, markdown_toHTML, DirectiveRegistry, LOG, state_connectToLogger

__all__ = [
    "Resolver",
    "Converter",
    "Variant",
    "markdown_toHTML",
    "DirectiveRegistry",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
