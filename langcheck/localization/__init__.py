"""Language file loading and key consistency checks."""

from .checker import (
    CheckResult,
    ConsistencyChecker,
    FileReport,
    compare_key_sets,
    key_set,
)
from .loader import LanguageFile, list_language_files, load_language_file

__all__ = [
    "CheckResult",
    "ConsistencyChecker",
    "FileReport",
    "LanguageFile",
    "compare_key_sets",
    "key_set",
    "list_language_files",
    "load_language_file",
]
