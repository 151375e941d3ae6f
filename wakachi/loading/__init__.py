"""Dictionary loading for Wakachi."""

from wakachi.loading.dictionary import (
    DictionaryFile,
    MorphEntry,
    load_dictionary,
    parse_dictionary,
)

__all__ = ["DictionaryFile", "MorphEntry", "load_dictionary", "parse_dictionary"]
