"""Reading exported collections and drafting new entries from parsed text."""

import json
from pathlib import Path
from typing import Any, Dict, Union

from ..core.constants import DEFAULT_CONDITION
from ..core.types import Collection, DiecastCar, ParsedInfo
from ..utils.error_handler import CollectionError, ConfigurationError
from ..utils.log import get_logger
from ..utils.validation import validate_file_path, validate_scale

logger = get_logger(__name__)


def parse_collection(data: Any) -> Collection:
    """
    Build a Collection from a decoded export document.

    The document looks like {"exportedAt": ..., "cars": [...],
    "customBrands": [...]}. Only "cars" is required.

    Raises:
        CollectionError: If "cars" is missing or an entry lacks brand/model
    """
    if not isinstance(data, dict) or not isinstance(data.get("cars"), list):
        raise CollectionError(
            "Collection export must contain a 'cars' list",
            details={"type": type(data).__name__}
        )

    cars = []
    for index, entry in enumerate(data["cars"]):
        if not isinstance(entry, dict):
            raise CollectionError(
                f"Car #{index} is not an object",
                details={"index": index}
            )
        missing = [key for key in ("brand", "model") if not entry.get(key)]
        if missing:
            raise CollectionError(
                f"Car #{index} is missing required fields: {missing}",
                details={"index": index, "missing_fields": missing}
            )
        cars.append(DiecastCar.from_dict(entry))

    custom_brands = data.get("customBrands") or []
    if not isinstance(custom_brands, list):
        raise CollectionError(
            "'customBrands' must be a list",
            details={"type": type(custom_brands).__name__}
        )

    return Collection(
        cars=cars,
        custom_brands=[str(brand) for brand in custom_brands],
        exported_at=data.get("exportedAt"),
    )


def load_collection(path: Union[str, Path]) -> Collection:
    """Read an exported collection JSON file."""
    try:
        file_path = validate_file_path(path, must_exist=True)
    except ConfigurationError as e:
        raise CollectionError(f"Collection file not found: {path}", details=e.details) from e

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CollectionError(
            f"Could not read collection file: {file_path}",
            details={"file_path": str(file_path), "error": str(e)}
        ) from e

    collection = parse_collection(data)
    logger.info(
        "Collection loaded",
        file=str(file_path),
        cars=len(collection.cars),
        custom_brands=len(collection.custom_brands),
    )
    return collection


def draft_from_parsed(info: ParsedInfo, notes: str = "") -> DiecastCar:
    """Pre-fill an editable car entry from parsed box text."""
    if info.model_id:
        notes = f"Model ID: {info.model_id}\n{notes}"
    return DiecastCar(
        id="",
        brand=info.brand or info.manufacturer,
        model=info.model,
        scale=validate_scale(info.scale),
        condition=DEFAULT_CONDITION,
        notes=notes or None,
    )
