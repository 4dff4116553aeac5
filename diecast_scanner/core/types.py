from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from .constants import KNOWN_BRANDS, UNKNOWN_MANUFACTURER, UNKNOWN_MODEL


@dataclass(frozen=True)
class ParsedInfo:
    """Fields extracted from the OCR text of a box. Every field is a suggestion."""

    manufacturer: str
    brand: str
    model: str
    model_id: str
    scale: str

    def search_key(self) -> str:
        """Composite query used to look the model up in a collection."""
        return f"{self.brand} {self.model} {self.model_id}"

    def low_confidence_fields(self) -> List[str]:
        """Names of the fields that fell back to a sentinel value."""
        fields = []
        if self.manufacturer == UNKNOWN_MANUFACTURER:
            fields.append("manufacturer")
        if self.brand == UNKNOWN_MANUFACTURER:
            fields.append("brand")
        if self.model == UNKNOWN_MODEL:
            fields.append("model")
        if not self.model_id:
            fields.append("model_id")
        return fields

    def to_dict(self) -> Dict[str, str]:
        return {
            "brand": self.brand,
            "model": self.model,
            "manufacturer": self.manufacturer,
            "modelId": self.model_id,
            "scale": self.scale,
        }


@dataclass
class DiecastCar:
    id: str
    brand: str
    model: str
    scale: str
    condition: str
    year: Optional[str] = None
    image_url: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DiecastCar":
        """Build a car from an exported record (camelCase keys).

        Values are coerced to strings; hand-edited exports may hold numbers.
        """
        def optional(key: str) -> Optional[str]:
            value = data.get(key)
            return None if value is None else str(value)

        return cls(
            id=str(data.get("id", "")),
            brand=str(data["brand"]),
            model=str(data["model"]),
            scale=optional("scale") or "",
            condition=optional("condition") or "",
            year=optional("year"),
            image_url=optional("imageUrl"),
            notes=optional("notes"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["imageUrl"] = data.pop("image_url")
        return {k: v for k, v in data.items() if v is not None}


@dataclass
class Collection:
    cars: List[DiecastCar] = field(default_factory=list)
    custom_brands: List[str] = field(default_factory=list)
    exported_at: Optional[str] = None

    @property
    def brands(self) -> List[str]:
        """Known publishers followed by user-added ones, without duplicates."""
        return list(dict.fromkeys([*KNOWN_BRANDS, *self.custom_brands]))


@dataclass
class MatchResult:
    car: DiecastCar
    score: float
    matched_key: str
