"""Allow running as ``python -m langcheck``."""

from langcheck.main import run

run()
