from dataclasses import dataclass

from app.config import settings
from app.errors import OutOfRange


def bound_take(value: int, minimum: int, maximum: int) -> int:
    """Return *value* if it lies within [minimum, maximum], else raise OutOfRange."""
    if value < minimum or value > maximum:
        raise OutOfRange(
            "take",
            value,
            f"'take' argument value '{value}' is outside the valid range "
            f"of '{minimum}' to '{maximum}'.",
        )
    return value


def bound_skip(value: int, minimum: int) -> int:
    """Return *value* if it is at least *minimum*, else raise OutOfRange."""
    if value < minimum:
        raise OutOfRange(
            "skip",
            value,
            f"'skip' argument value '{value}' is below the min of '{minimum}'.",
        )
    return value


@dataclass(frozen=True)
class FeedWindow:
    """
    Validated arguments of the ``feed`` query.

    Attributes
    ----------
    filter_needle:
        Substring matched against link description or url, or None for no
        filter.  An empty string is treated as no filter.
    skip:
        Number of leading links to skip.  One-based: the minimum accepted
        value is ``settings.FEED_MIN_SKIP`` (1), so ``skip=0`` is rejected.
    take:
        Maximum number of links returned, within
        ``settings.FEED_MIN_TAKE``..``settings.FEED_MAX_TAKE``.
    """

    filter_needle: str | None
    skip: int
    take: int

    @classmethod
    def resolve(
        cls,
        filter_needle: str | None = None,
        skip: int | None = None,
        take: int | None = None,
    ) -> "FeedWindow":
        """Fill absent arguments with the configured defaults, then bound them."""
        if skip is None:
            skip = settings.FEED_DEFAULT_SKIP
        if take is None:
            take = settings.FEED_DEFAULT_TAKE

        return cls(
            filter_needle=filter_needle or None,
            take=bound_take(take, settings.FEED_MIN_TAKE, settings.FEED_MAX_TAKE),
            skip=bound_skip(skip, settings.FEED_MIN_SKIP),
        )
