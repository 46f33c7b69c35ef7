from .dictionary import (
    FALLBACK_WORDS,
    DictionaryError,
    DictionaryReport,
    fallback_dictionary,
    load_dictionary,
    parse_dictionary,
    pretty_summary,
)
from .io import read_text, write_lines

__all__ = [
    "FALLBACK_WORDS", "DictionaryError", "DictionaryReport", "fallback_dictionary",
    "load_dictionary", "parse_dictionary", "pretty_summary", "read_text", "write_lines",
]
