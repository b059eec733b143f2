"""Source text -> ConfigMapping: locate, normalize, evaluate."""

from __future__ import annotations

import logging
from pathlib import Path

from cssvars.errors import ConstantNotFoundError, SourceReadError
from cssvars.evaluator import evaluate_literal
from cssvars.extraction.locator import locate_literal
from cssvars.extraction.normalizer import normalize_literal
from cssvars.model.target import ExtractionTarget

logger = logging.getLogger(__name__)


def read_source(path: Path) -> str:
    """Read a UTF-8 source file, raising SourceReadError on any failure."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {path}: {exc}", str(path)) from exc


def extract_mapping(
    source: str, constant_name: str, source_path: str | None = None
) -> dict[str, str]:
    """Extract the mapping bound to *constant_name* from *source* text."""
    raw = locate_literal(source, constant_name)
    if raw is None:
        raise ConstantNotFoundError(constant_name, source_path)
    normalized = normalize_literal(raw)
    logger.debug("Normalized %s: %s", constant_name, normalized)
    return evaluate_literal(normalized, constant_name)


def extract_from_file(target: ExtractionTarget) -> dict[str, str]:
    """Read *target*'s file and extract its constant."""
    source = read_source(target.file_path)
    return extract_mapping(source, target.constant_name, str(target.file_path))
