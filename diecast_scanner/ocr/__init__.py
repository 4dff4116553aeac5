"""OCR package for field extraction from die-cast box text."""

from .extract import OCRTextParser, ocr_text_parser, parse_ocr_text
from .regexes import (
    MODEL_ID_PATTERN,
    SCALE_PATTERN,
    collapse_whitespace,
    find_known,
    find_model_id,
    find_scale,
)

__all__ = [
    "OCRTextParser",
    "ocr_text_parser",
    "parse_ocr_text",
    "SCALE_PATTERN",
    "MODEL_ID_PATTERN",
    "collapse_whitespace",
    "find_known",
    "find_model_id",
    "find_scale",
]
