"""
GraphQL object types.

Python class names carry a ``Type`` suffix to stay clear of the ORM models;
the GraphQL names are ``Link`` and ``Comment``.
"""
from typing import Optional

import strawberry

from app.models import Comment, Link


@strawberry.type(name="Link")
class LinkType:
    id: strawberry.ID
    description: str
    url: str

    @strawberry.field
    async def comments(self, info: strawberry.Info) -> list["CommentType"]:
        from .resolvers import resolve_link_comments

        return await resolve_link_comments(info, int(self.id))

    @classmethod
    def from_model(cls, link: Link) -> "LinkType":
        return cls(id=strawberry.ID(str(link.id)), description=link.description, url=link.url)


@strawberry.type(name="Comment")
class CommentType:
    id: strawberry.ID
    body: str
    link_id: strawberry.Private[Optional[int]]

    @strawberry.field
    async def link(self, info: strawberry.Info) -> Optional[LinkType]:
        from .resolvers import resolve_comment_link

        return await resolve_comment_link(info, self.link_id)

    @classmethod
    def from_model(cls, comment: Comment) -> "CommentType":
        return cls(id=strawberry.ID(str(comment.id)), body=comment.body, link_id=comment.link_id)
