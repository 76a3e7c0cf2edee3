"""
slidemark - Presentation markup tokenizer

A small markup language for slides: pages, progressively revealed
transitions, rich text, lists, images and code blocks.
"""

__version__ = "0.1.0"

from .lib import Tokenizer, tokenize, into_pages, pages_fromSource, SlidemarkLexer, LOG, state_connectToLogger

__all__ = [
    "Tokenizer",
    "tokenize",
    "into_pages",
    "pages_fromSource",
    "SlidemarkLexer",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
