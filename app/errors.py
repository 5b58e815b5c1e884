"""
Error taxonomy.

``ApiError`` subclasses are raised by resolvers and surface verbatim to the
GraphQL caller; graphql-core copies their ``extensions`` dict onto the
located error, so every error in a response carries a machine-readable
``code`` next to its message.

``StoreError`` is raised by the data-access layer for integrity failures and
is tagged with a ``StoreErrorKind`` so callers can branch on the kind of
violation without inspecting driver exceptions themselves.
"""
import enum

from sqlalchemy.exc import IntegrityError


# ---------------------------------------------------------------------------
# API errors
# ---------------------------------------------------------------------------

class ApiError(Exception):
    code = "API_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.extensions = {"code": self.code}


class OutOfRange(ApiError):
    code = "OUT_OF_RANGE"

    def __init__(self, argument: str, value: int, message: str) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


class InvalidLink(ApiError):
    code = "INVALID_LINK"

    def __init__(self, url: str) -> None:
        super().__init__(f"Cannot post link with invalid url '{url}'.")
        self.url = url


class LinkNotFound(ApiError):
    code = "LINK_NOT_FOUND"

    def __init__(self, link_id: str) -> None:
        super().__init__(f"Cannot post comment on non-existing link with id '{link_id}'.")
        self.link_id = link_id


class EmptyComment(ApiError):
    code = "EMPTY_COMMENT"

    def __init__(self) -> None:
        super().__init__("Please include a comment")


# ---------------------------------------------------------------------------
# Store failures
# ---------------------------------------------------------------------------

class StoreErrorKind(enum.Enum):
    REFERENCE_VIOLATED = "reference_violated"
    UNIQUE_VIOLATED = "unique_violated"
    NOT_NULL_VIOLATED = "not_null_violated"
    OTHER = "other"


# PostgreSQL SQLSTATE codes (class 23, integrity constraint violation)
_SQLSTATE_KINDS = {
    "23503": StoreErrorKind.REFERENCE_VIOLATED,
    "23505": StoreErrorKind.UNIQUE_VIOLATED,
    "23502": StoreErrorKind.NOT_NULL_VIOLATED,
}

# SQLite reports constraint failures only through the message text
_SQLITE_MESSAGE_KINDS = (
    ("FOREIGN KEY constraint failed", StoreErrorKind.REFERENCE_VIOLATED),
    ("UNIQUE constraint failed", StoreErrorKind.UNIQUE_VIOLATED),
    ("NOT NULL constraint failed", StoreErrorKind.NOT_NULL_VIOLATED),
)


class StoreError(Exception):
    def __init__(self, kind: StoreErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def classify_integrity_error(exc: IntegrityError) -> StoreErrorKind:
    """
    Map a SQLAlchemy ``IntegrityError`` to a ``StoreErrorKind``.

    asyncpg's adapted exceptions expose the SQLSTATE as ``sqlstate`` (and
    ``pgcode`` on newer SQLAlchemy releases); SQLite only gives a message.
    """
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[sqlstate]

    message = str(orig)
    for fragment, kind in _SQLITE_MESSAGE_KINDS:
        if fragment in message:
            return kind
    return StoreErrorKind.OTHER
