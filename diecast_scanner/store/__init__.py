"""Collection import and entry drafting."""

from .collection import draft_from_parsed, load_collection, parse_collection

__all__ = ["load_collection", "parse_collection", "draft_from_parsed"]
