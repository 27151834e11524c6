"""Load checker settings from a YAML file and command line overrides."""

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigurationError
from .settings import CheckerSettings

logger = structlog.get_logger()


def _read_config_file(config_file: Path) -> Dict[str, Any]:
    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read config file {config_file}: {e.strerror or e}",
            config_key="config_file",
            previous_error=e,
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file {config_file}: {e}",
            config_key="config_file",
            previous_error=e,
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_file} must contain a mapping",
            config_key="config_file",
        )

    # Relative directories in a config file are relative to that file
    lang_dir = data.get("lang_dir")
    if isinstance(lang_dir, str) and not Path(lang_dir).is_absolute():
        data["lang_dir"] = config_file.parent / lang_dir

    return data


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> CheckerSettings:
    """Build settings from an optional config file.

    Args:
        config_file: YAML file with CheckerSettings field names
        **overrides: Values that take precedence over the file; None is ignored

    Returns:
        Validated settings
    """
    data: Dict[str, Any] = {}
    if config_file is not None:
        config_file = Path(config_file)
        data.update(_read_config_file(config_file))
        logger.debug("Config file loaded", file=str(config_file), keys=sorted(data))

    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        settings = CheckerSettings(**data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid setting '{field}': {first.get('msg')}",
            config_key=field or None,
            previous_error=e,
        ) from e

    logger.debug("Configuration loaded", lang_dir=str(settings.lang_dir), extension=settings.extension)
    return settings
