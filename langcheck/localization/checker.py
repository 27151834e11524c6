"""Key-set consistency check across language files."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import structlog

from ..config import CheckerSettings
from ..errors import (
    ConfigurationError,
    InconsistentKeysError,
    LangCheckError,
    NoResourcesError,
    log_errors,
)
from .loader import LanguageFile, list_language_files, load_language_file

logger = structlog.get_logger()


def key_set(mapping: Mapping[str, Any]) -> List[str]:
    """Top-level keys of a language mapping in code-point order."""
    return sorted(mapping.keys())


@dataclass
class FileReport:
    """Comparison of one language file against the reference keys."""

    file: str
    key_count: int
    consistent: bool
    missing_keys: List[str] = field(default_factory=list)
    extra_keys: List[str] = field(default_factory=list)

    def describe(self) -> str:
        parts = []
        if self.missing_keys:
            parts.append("missing " + ", ".join(self.missing_keys))
        if self.extra_keys:
            parts.append("extra " + ", ".join(self.extra_keys))
        return f"{self.file}: " + ("; ".join(parts) if parts else "consistent")


def compare_key_sets(file: str, reference: Sequence[str], keys: Sequence[str]) -> FileReport:
    """Compare a sorted key list against the sorted reference list."""
    reference_set = set(reference)
    own_set = set(keys)
    return FileReport(
        file=file,
        key_count=len(keys),
        consistent=list(keys) == list(reference),
        missing_keys=sorted(reference_set - own_set),
        extra_keys=sorted(own_set - reference_set),
    )


@dataclass
class CheckResult:
    """Outcome of a consistency check over one directory."""

    directory: Path
    reference: Optional[str] = None
    reports: List[FileReport] = field(default_factory=list)
    load_errors: List[LangCheckError] = field(default_factory=list)

    @property
    def mismatched(self) -> List[FileReport]:
        return [report for report in self.reports if not report.consistent]

    @property
    def success(self) -> bool:
        return not self.load_errors and not self.mismatched

    def raise_for_status(self) -> None:
        """Raise if the run did not succeed."""
        if self.load_errors:
            raise LangCheckError(
                f"{len(self.load_errors)} language file(s) failed to load",
                context={"errors": [error.to_dict() for error in self.load_errors]},
            )
        mismatched = self.mismatched
        if mismatched:
            raise InconsistentKeysError(
                f"{len(mismatched)} language file(s) differ from {self.reference}",
                files=[report.file for report in mismatched],
            )


class ConsistencyChecker:
    """Verifies every language file in a directory declares the same keys."""

    def __init__(self, settings: CheckerSettings):
        self.settings = settings

    def _load_all(self, paths: List[Path]) -> Tuple[List[LanguageFile], List[LangCheckError]]:
        files: List[LanguageFile] = []
        errors: List[LangCheckError] = []
        for path in paths:
            try:
                files.append(load_language_file(path))
            except LangCheckError as e:
                if not self.settings.collect_errors:
                    raise
                logger.warning("Failed to load translation file", file=str(path), error=e.message)
                errors.append(e)
        return files, errors

    def _reference_name(self, paths: List[Path]) -> str:
        wanted = self.settings.reference
        if wanted is None:
            return paths[0].name

        for path in paths:
            if wanted in (path.name, path.stem):
                return path.name

        raise ConfigurationError(
            f"Reference language file '{wanted}' not found in {self.settings.lang_dir}",
            config_key="reference",
        )

    @log_errors(
        level="info",
        operation_name="consistency_check",
        context=lambda self: {"dir": str(self.settings.lang_dir)},
    )
    def run(self) -> CheckResult:
        """Load all language files and compare their key sets.

        Returns:
            CheckResult with one report per loaded file
        """
        directory = self.settings.lang_dir
        paths = list_language_files(directory, self.settings.extension)

        if not paths:
            if self.settings.allow_empty:
                logger.warning("No language files found", dir=str(directory))
                return CheckResult(directory=directory)
            raise NoResourcesError(
                f"No {self.settings.extension} files found in {directory}",
                directory=str(directory),
            )

        reference_name = self._reference_name(paths)
        files, load_errors = self._load_all(paths)
        result = CheckResult(directory=directory, reference=reference_name, load_errors=load_errors)

        if not files:
            logger.warning("No language file could be loaded", dir=str(directory))
            return result

        reference = next((f for f in files if f.name == reference_name), None)
        if reference is None:
            # Reference failed to load; compare the rest against the first file that did
            reference = files[0]
            logger.warning(
                "Reference file could not be loaded",
                reference=reference_name,
                fallback=reference.name,
            )
            result.reference = reference.name

        reference_keys = key_set(reference.data)
        logger.info("Reference key set", reference=result.reference, keys=len(reference_keys))

        for language_file in files:
            report = compare_key_sets(language_file.name, reference_keys, key_set(language_file.data))
            if not report.consistent:
                logger.info(
                    "Key set mismatch",
                    file=report.file,
                    missing=report.missing_keys,
                    extra=report.extra_keys,
                )
            result.reports.append(report)

        return result
