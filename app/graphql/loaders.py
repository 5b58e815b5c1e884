"""
Per-request DataLoaders for the relationship fields.

``Link.comments`` and ``Comment.link`` resolve once per parent object.
Keys requested while one level of the query is being resolved are
collected and fetched with a single statement, so a feed page costs one
query for the links plus one for all of their comments.
"""
from collections import defaultdict
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager

from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.dataloader import DataLoader

from app.models import Comment, Link
from app.services import comment_service, link_service

SessionOpener = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def _batch_links(open_session: SessionOpener):
    async def load_links(keys: list[int]) -> list[Link | None]:
        """Batch load links by id."""
        async with open_session() as db:
            links = await link_service.get_links_by_ids(db, keys)
        links_map = {link.id: link for link in links}
        return [links_map.get(key) for key in keys]

    return load_links


def _batch_comments_by_link(open_session: SessionOpener):
    async def load_comments_by_link(keys: list[int]) -> list[list[Comment]]:
        """Batch load the comments of several links, oldest first per link."""
        async with open_session() as db:
            comments = await comment_service.get_comments_for_links(db, keys)
        grouped: dict[int, list[Comment]] = defaultdict(list)
        for comment in comments:
            grouped[comment.link_id].append(comment)
        return [grouped.get(key, []) for key in keys]

    return load_comments_by_link


class Loaders:
    def __init__(self, open_session: SessionOpener):
        self.link_loader = DataLoader(load_fn=_batch_links(open_session))
        self.comments_by_link_loader = DataLoader(load_fn=_batch_comments_by_link(open_session))
