"""Configuration for langcheck."""

from .loader import load_config
from .settings import DEFAULT_LANG_DIR, CheckerSettings

__all__ = ["CheckerSettings", "DEFAULT_LANG_DIR", "load_config"]
