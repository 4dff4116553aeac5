from typing import Final, Tuple

# Canonical scale denominations, in lookup priority order
KNOWN_SCALES: Final[Tuple[str, ...]] = ("1:18", "1:24", "1:32", "1:43", "1:64")

# Die-cast publishers. Earlier entries win when several occur in the text.
KNOWN_BRANDS: Final[Tuple[str, ...]] = (
    "Hot Wheels", "Matchbox", "MINIGT", "Pop race", "CCA", "Para64",
    "Inno64", "KaidoHouse", "Bburago", "Maisto", "BBR", "Tomica",
    "Tarmac Works", "Solido", "Greenlight",
)

# Real-world vehicle marques, distinct from the publishers above
KNOWN_MAKES: Final[Tuple[str, ...]] = (
    "Porsche", "Ferrari", "Lamborghini", "Nissan", "Toyota", "Honda",
    "BMW", "Mercedes", "Ford", "Chevrolet", "Dodge",
)

# Fallback values for undetected fields
DEFAULT_SCALE: Final[str] = "1:64"
UNKNOWN_MANUFACTURER: Final[str] = "Unknown Manufacturer"
UNKNOWN_MODEL: Final[str] = "Unknown Model"

# Model-name lines must be longer than this
MIN_MODEL_LINE_LENGTH: Final[int] = 3

# Collection matching defaults (0.0 = perfect, 1.0 = no match)
SEARCH_KEYS: Final[Tuple[str, ...]] = ("brand", "model", "notes")
SEARCH_THRESHOLD: Final[float] = 0.4
MATCH_ACCEPT_SCORE: Final[float] = 0.5

DEFAULT_CONDITION: Final[str] = "New"
