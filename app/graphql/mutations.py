"""
Root GraphQL mutation definitions
"""
import strawberry

from .resolvers import resolve_post_comment_on_link, resolve_post_link
from .types import CommentType, LinkType


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    @strawberry.mutation
    async def post_link(self, info: strawberry.Info, url: str, description: str) -> LinkType:
        """Create a link. The url must be http(s) with a path."""
        return await resolve_post_link(info, url, description)

    @strawberry.mutation
    async def post_comment_on_link(
        self, info: strawberry.Info, link_id: strawberry.ID, body: str
    ) -> CommentType:
        """Attach a non-empty comment to an existing link."""
        return await resolve_post_comment_on_link(info, link_id, body)
