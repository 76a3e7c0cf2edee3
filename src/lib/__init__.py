"""
slidemark - Presentation markup tokenizer

Scans slidemark text into a flat stream of marks and groups that stream into
pages of progressively revealed transitions.
"""

__version__ = "0.1.0"

from .tokenizer import Tokenizer, tokenize
from .grouper import into_pages, pages_fromSource
from .lexer import SlidemarkLexer
from .log import LOG, state_connectToLogger

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
