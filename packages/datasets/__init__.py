from .dictionary import (DEFAULT_DICTIONARY_PATH, DICTIONARY_CACHE_KEY, DICTIONARY_TTL_SEC,
                         load_dictionary, normalize_lines)
from .validator import validate_dictionary, pretty_summary
from .io import read_lines, write_lines

__all__ = [
    "load_dictionary", "normalize_lines", "validate_dictionary", "pretty_summary",
    "read_lines", "write_lines",
    "DEFAULT_DICTIONARY_PATH", "DICTIONARY_CACHE_KEY", "DICTIONARY_TTL_SEC",
]
