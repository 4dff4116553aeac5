"""
Input validation and sanitization utilities.

Used at the edges of the scanner (CLI arguments, exported collection
files, matching thresholds). The text parser accepts anything.
"""

import re
from typing import Any, Optional, Union
from pathlib import Path

from .error_handler import ConfigurationError

CANONICAL_SCALE_PATTERN = re.compile(r'^1:[0-9]{2}$')


def validate_file_path(file_path: Union[str, Path], must_exist: bool = False) -> Path:
    """
    Validate and normalize a file path.

    Args:
        file_path: File path to validate
        must_exist: Whether the file must already exist

    Returns:
        Normalized Path object

    Raises:
        ConfigurationError: If path is invalid or file doesn't exist when required
    """
    try:
        path = Path(file_path)

        if must_exist and not path.is_file():
            raise ConfigurationError(
                f"File does not exist: {path}",
                details={"file_path": str(path), "must_exist": must_exist}
            )

        return path.resolve()

    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Invalid file path: {file_path}",
            details={"file_path": str(file_path), "error": str(e)}
        )


def validate_numeric_range(
    value: Union[int, float],
    min_value: Optional[Union[int, float]] = None,
    max_value: Optional[Union[int, float]] = None,
    field_name: str = "value"
) -> Union[int, float]:
    """
    Validate a numeric value is within specified range.

    Args:
        value: Numeric value to validate
        min_value: Minimum allowed value (inclusive)
        max_value: Maximum allowed value (inclusive)
        field_name: Name of the field for error messages

    Returns:
        The validated value

    Raises:
        ConfigurationError: If value is outside the allowed range
    """
    details = {
        "field_name": field_name,
        "value": value,
        "min_value": min_value,
        "max_value": max_value
    }
    if min_value is not None and value < min_value:
        raise ConfigurationError(f"{field_name} {value} is below minimum {min_value}", details=details)

    if max_value is not None and value > max_value:
        raise ConfigurationError(f"{field_name} {value} is above maximum {max_value}", details=details)

    return value


def validate_scale(scale: str) -> str:
    """Check that a scale is in canonical "1:NN" form."""
    if not isinstance(scale, str) or not CANONICAL_SCALE_PATTERN.match(scale):
        raise ConfigurationError(
            f"Invalid scale: {scale!r}",
            details={"scale": scale, "expected": "1:NN"}
        )
    return scale


def sanitize_text(text: Any) -> str:
    """Coerce OCR input to a string; string content is passed through unchanged."""
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return text
