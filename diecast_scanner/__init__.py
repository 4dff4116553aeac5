"""Diecast Scanner - Extract model details from scanned die-cast box text."""

__version__ = "1.0.0"
__author__ = "Diecast Scanner Team"
__description__ = "Heuristic field extraction from OCR text of die-cast model car packaging"

from .core.types import Collection, DiecastCar, MatchResult, ParsedInfo
from .match.search import CollectionMatcher
from .ocr.extract import ocr_text_parser, parse_ocr_text
from .store.collection import draft_from_parsed, load_collection
from .utils.config import settings

# Core functionality imports
from .utils.log import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__description__",
    # Core components
    "configure_logging",
    "get_logger",
    "settings",
    "parse_ocr_text",
    "ocr_text_parser",
    "ParsedInfo",
    "DiecastCar",
    "Collection",
    "MatchResult",
    "CollectionMatcher",
    "load_collection",
    "draft_from_parsed",
]
