"""Extraction of the organized grocery list from model output."""

import json
import re

from pydantic import TypeAdapter, ValidationError

GROCERY_LIST_PATTERN = re.compile(r'"grocery_list":\s*(\[[^\]]*\])')
EXTRACTION_ERROR_MESSAGE = "Failed to extract grocery list from response"

_ITEMS_ADAPTER = TypeAdapter(list[str])


class GroceryListExtractionError(ValueError):
    """Raised when model output does not contain a usable grocery list."""

    def __init__(self, message: str = EXTRACTION_ERROR_MESSAGE) -> None:
        super().__init__(message)


def parse_grocery_list(text: str) -> list[str]:
    """Return the ``"grocery_list"`` array embedded anywhere in ``text``.

    Items keep the order the model produced them in (most to least fragile).
    Raises ``GroceryListExtractionError`` when the pattern is missing, the
    captured fragment is not valid JSON, or an entry is not a string.
    """
    match = GROCERY_LIST_PATTERN.search(text)
    if match is None:
        raise GroceryListExtractionError
    try:
        raw = json.loads(match.group(1))
        return _ITEMS_ADAPTER.validate_python(raw, strict=True)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise GroceryListExtractionError from exc
