# backend/utils/messages.py
from enum import Enum

from backend.utils.errors import InvalidCategoryError


class Category(Enum):
    CLOSING_SOON = "closing/soon"
    CLOSING_NOW = "closing/now"
    CLOSING_EARLY = "closing/early"


MESSAGES = {
    Category.CLOSING_SOON: "Hey guys, just to let you know, we'll be closing soon.",
    Category.CLOSING_NOW: "We're closing! Get down here *now* if you want coffee!",
    Category.CLOSING_EARLY: (
        "Hey guys, we'll be closing early today.. maybe 2, or 3 or something. I dunno. "
        "This thing doesn't let me put in a number."
    ),
}


def parse_category(path) -> Category:
    try:
        return Category(path)
    except (ValueError, TypeError):
        raise InvalidCategoryError(f"Invalid path specified: {path}") from None


def resolve_message(path) -> str:
    """
    Map an API Gateway proxy path (e.g. "closing/soon") to the text we send.
    Raises InvalidCategoryError for anything outside the closing events.
    """
    return MESSAGES[parse_category(path)]
