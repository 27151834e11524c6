"""Discovery and loading of language files."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Union

import structlog

from ..errors import ResourceParseError, ResourceReadError

logger = structlog.get_logger()


@dataclass(frozen=True)
class LanguageFile:
    """A parsed language file. Only its top-level keys are ever inspected."""

    path: Path
    data: Dict[str, Any]

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def language_code(self) -> str:
        return self.path.stem


def list_language_files(directory: Union[str, Path], extension: str = ".json") -> List[Path]:
    """List language files in a directory.

    Args:
        directory: Directory containing translation files
        extension: File name suffix to match, including the dot

    Returns:
        Matching file paths sorted by file name
    """
    directory = Path(directory)

    if not directory.exists():
        raise ResourceReadError(f"Translations directory not found: {directory}", path=str(directory))
    if not directory.is_dir():
        raise ResourceReadError(f"Not a directory: {directory}", path=str(directory))

    try:
        entries = list(directory.iterdir())
    except OSError as e:
        raise ResourceReadError(
            f"Cannot list translations directory {directory}: {e.strerror or e}",
            path=str(directory),
            previous_error=e,
        ) from e

    files = sorted(
        (entry for entry in entries if entry.name.endswith(extension) and entry.is_file()),
        key=lambda entry: entry.name,
    )
    logger.debug("Found language files", dir=str(directory), count=len(files))
    return files


def load_language_file(path: Union[str, Path]) -> LanguageFile:
    """Read and parse a single language file.

    Raises:
        ResourceReadError: the file cannot be read
        ResourceParseError: the contents are not a JSON object
    """
    path = Path(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ResourceParseError(f"{path.name}: not valid UTF-8 ({e.reason})", path=str(path), previous_error=e) from e
    except OSError as e:
        raise ResourceReadError(
            f"Cannot read {path}: {e.strerror or e}",
            path=str(path),
            previous_error=e,
        ) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ResourceParseError(
            f"{path.name}: invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            path=str(path),
            line=e.lineno,
            column=e.colno,
            previous_error=e,
        ) from e

    if not isinstance(data, dict):
        raise ResourceParseError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}",
            path=str(path),
        )

    logger.info("Loaded translations", language=path.stem, file=str(path), keys=len(data))
    return LanguageFile(path=path, data=data)
