from __future__ import annotations

from typing import Tuple


class Messages:
    INVALID_SYNTAX = "Invalid input syntax"
    INVALID_ARTICLE_ID = "Invalid article_id"
    INVALID_VOTES = "Invalid votes increment"
    BAD_SORT = "Sort parameter does not exist"
    BAD_ORDER = "Order parameter does not exist"

    ITEM_MISSING = "item does not exist"
    ARTICLE_MISSING = "Article does not exist"
    COMMENT_MISSING = "Comment does not exist"
    TOPIC_MISSING = "Topic does not exist"
    USER_MISSING = "User does not exist"
    PATH_MISSING = "path is not found"

    EMPTY_COMMENT = "Comment body and username cannot be empty"
    EMPTY_ARTICLE = "Article body, title, topic and author cannot be empty"
    EMPTY_TOPIC = "Slug and description cannot be empty"
    DUPLICATE_SLUG = "Topic with the same slug already exists"
    DUPLICATE_DESCRIPTION = "Topic with the same description already exists"

    INTERNAL = "Internal server error"

    @staticmethod
    def article_missing(article_id) -> str:
        return f"Article {article_id} does not exist"


class ApiError(Exception):
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedInput(ApiError):
    """Request is structurally wrong: id syntax, enum value, vote delta."""

    status_code = 400


class InvalidSyntax(MalformedInput):
    def __init__(self, message: str = Messages.INVALID_SYNTAX) -> None:
        super().__init__(message)


class NotFound(ApiError):
    status_code = 404


class UnprocessableContent(ApiError):
    """Payload is well-formed but missing required fields or conflicts with stored data."""

    status_code = 422


def classify(exc: BaseException) -> Tuple[int, str]:
    if isinstance(exc, ApiError):
        return exc.status_code, exc.message
    return 500, Messages.INTERNAL
