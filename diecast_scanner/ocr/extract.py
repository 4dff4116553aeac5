"""Field extraction from raw OCR text of die-cast model boxes."""

from typing import Any, List, Tuple

from ..core.constants import (
    DEFAULT_SCALE,
    KNOWN_BRANDS,
    KNOWN_MAKES,
    KNOWN_SCALES,
    MIN_MODEL_LINE_LENGTH,
    UNKNOWN_MANUFACTURER,
    UNKNOWN_MODEL,
)
from ..core.types import ParsedInfo
from ..utils.log import LoggerMixin
from ..utils.validation import sanitize_text
from .regexes import collapse_whitespace, find_known, find_model_id, find_scale


class OCRTextParser(LoggerMixin):
    """
    Turns recognized box-art text into a ParsedInfo record.

    Detectors run in a fixed order (scale, manufacturer, model id, make,
    model name). The model-name detector excludes lines already attributed
    to the earlier ones. Parsing never raises: anything undetected falls
    back to a sentinel value.
    """

    def parse(self, text: Any) -> ParsedInfo:
        text = sanitize_text(text)
        lines = self._split_lines(text)
        full_text = collapse_whitespace(text)
        lower_text = full_text.lower()

        scale = self.detect_scale(full_text, lower_text)
        manufacturer = self.detect_manufacturer(lower_text)
        model_id = find_model_id(full_text)
        brand = self.detect_make(lower_text)
        model = self.detect_model(lines, manufacturer, brand, scale)

        info = ParsedInfo(
            manufacturer=manufacturer or UNKNOWN_MANUFACTURER,
            brand=brand or manufacturer or UNKNOWN_MANUFACTURER,
            model=model or UNKNOWN_MODEL,
            model_id=model_id,
            scale=scale,
        )

        self.logger.debug(
            "OCR text parsed",
            line_count=len(lines),
            manufacturer=info.manufacturer,
            brand=info.brand,
            model=info.model,
            model_id=info.model_id,
            scale=info.scale,
            low_confidence=info.low_confidence_fields(),
        )
        return info

    @staticmethod
    def _split_lines(text: str) -> List[str]:
        """Non-empty trimmed lines, in order."""
        return [line.strip() for line in text.split('\n') if line.strip()]

    def detect_scale(self, full_text: str, lower_text: str) -> str:
        scale = find_scale(full_text)
        if scale:
            return scale
        return find_known(lower_text, KNOWN_SCALES) or DEFAULT_SCALE

    def detect_manufacturer(self, lower_text: str) -> str:
        return find_known(lower_text, KNOWN_BRANDS)

    def detect_make(self, lower_text: str) -> str:
        return find_known(lower_text, KNOWN_MAKES)

    def detect_model(
        self, lines: List[str], manufacturer: str, brand: str, scale: str
    ) -> str:
        """
        Pick the line most likely to name the model.

        Lines equal to the manufacturer or make, lines carrying the scale,
        and lines of 3 characters or fewer are dropped. Among the rest,
        lines that do not mention the manufacturer are preferred. With no
        candidate at all, the second line is used as-is when there is one.
        """
        candidates, better = self._model_candidates(lines, manufacturer, brand, scale)
        if better:
            return better[0]
        if candidates:
            return candidates[0]
        if len(lines) > 1:
            return lines[1]
        return ''

    @staticmethod
    def _model_candidates(
        lines: List[str], manufacturer: str, brand: str, scale: str
    ) -> Tuple[List[str], List[str]]:
        manufacturer_lower = manufacturer.lower()
        brand_lower = brand.lower()
        scale_lower = scale.lower()

        candidates = [
            line for line in lines
            if line.lower() != manufacturer_lower
            and line.lower() != brand_lower
            and scale_lower not in line.lower()
            and len(line) > MIN_MODEL_LINE_LENGTH
        ]
        # An empty manufacturer is contained in every line, so nothing is "better"
        better = [line for line in candidates if manufacturer_lower not in line.lower()]
        return candidates, better


# Global singleton
ocr_text_parser = OCRTextParser()


def parse_ocr_text(text: Any) -> ParsedInfo:
    """Extract brand, model, manufacturer, model id and scale from OCR text."""
    return ocr_text_parser.parse(text)
