from cssvars.extraction.extract import extract_from_file, extract_mapping, read_source
from cssvars.extraction.locator import STRATEGIES, locate_literal
from cssvars.extraction.normalizer import normalize_literal

__all__ = [
    "STRATEGIES",
    "extract_from_file",
    "extract_mapping",
    "locate_literal",
    "normalize_literal",
    "read_source",
]
