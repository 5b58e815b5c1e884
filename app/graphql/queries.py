"""
Root GraphQL query definitions
"""
from typing import Optional

import strawberry

from .resolvers import resolve_comment, resolve_feed, resolve_info, resolve_link
from .types import CommentType, LinkType


def _given(value):
    """Map strawberry's UNSET (argument omitted) to None."""
    return None if value is strawberry.UNSET else value


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    def info(self) -> str:
        return resolve_info()

    @strawberry.field
    async def comment(self, info: strawberry.Info, id: strawberry.ID) -> Optional[CommentType]:
        return await resolve_comment(info, id)

    @strawberry.field
    async def link(
        self, info: strawberry.Info, id: Optional[strawberry.ID] = strawberry.UNSET
    ) -> Optional[LinkType]:
        return await resolve_link(info, _given(id))

    @strawberry.field
    async def feed(
        self,
        info: strawberry.Info,
        filter_needle: Optional[str] = strawberry.UNSET,
        skip: Optional[int] = strawberry.UNSET,
        take: Optional[int] = strawberry.UNSET,
    ) -> list[LinkType]:
        """Links, optionally filtered by a substring of description or url."""
        return await resolve_feed(info, _given(filter_needle), _given(skip), _given(take))
