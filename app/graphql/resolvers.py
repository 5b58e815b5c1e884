"""
Resolver functions for the Query, Mutation, Link and Comment fields.

Every resolver follows the same shape: parse and validate the raw
arguments, open a unit of work through ``info.context.session()``, call
the service layer, and convert ORM rows into GraphQL types.  The
``Link.comments`` and ``Comment.link`` fields go through the request
loaders (``info.context.loaders``) instead, batching one statement per
level of the query.  Known store
failures are translated into ``ApiError`` subclasses here; anything else
propagates unchanged and shows up as an opaque error on the field.
"""
from __future__ import annotations

import logging

import strawberry

from app.config import settings
from app.errors import EmptyComment, InvalidLink, LinkNotFound, StoreError, StoreErrorKind
from app.pagination import FeedWindow
from app.services import comment_service, link_service
from app.validation import parse_http_url, parse_record_id

from .context import GraphQLContext
from .types import CommentType, LinkType

logger = logging.getLogger(__name__)


def _context(info: strawberry.Info) -> GraphQLContext:
    return info.context


# Query resolvers

def resolve_info() -> str:
    return settings.API_INFO


async def resolve_feed(
    info: strawberry.Info,
    filter_needle: str | None,
    skip: int | None,
    take: int | None,
) -> list[LinkType]:
    window = FeedWindow.resolve(filter_needle=filter_needle, skip=skip, take=take)

    async with _context(info).session() as db:
        links = await link_service.get_links(db, window.filter_needle, window.skip, window.take)
    return [LinkType.from_model(link) for link in links]


async def resolve_link(info: strawberry.Info, id: str | None) -> LinkType | None:
    """
    Look up a link by id.

    An absent, non-numeric or out-of-range id resolves to null, the same
    as an id that matches no row.
    """
    link_id = parse_record_id(id) if id else None
    if link_id is None:
        return None

    async with _context(info).session() as db:
        link = await link_service.get_link(db, link_id)
    return LinkType.from_model(link) if link else None


async def resolve_comment(info: strawberry.Info, id: str) -> CommentType | None:
    comment_id = parse_record_id(id)
    if comment_id is None:
        return None

    async with _context(info).session() as db:
        comment = await comment_service.get_comment(db, comment_id)
    return CommentType.from_model(comment) if comment else None


# Field resolvers

async def resolve_link_comments(info: strawberry.Info, link_id: int) -> list[CommentType]:
    comments = await _context(info).loaders.comments_by_link_loader.load(link_id)
    return [CommentType.from_model(c) for c in comments]


async def resolve_comment_link(info: strawberry.Info, link_id: int | None) -> LinkType | None:
    if link_id is None:
        return None

    link = await _context(info).loaders.link_loader.load(link_id)
    return LinkType.from_model(link) if link else None


# Mutation resolvers

async def resolve_post_link(info: strawberry.Info, url: str, description: str) -> LinkType:
    if parse_http_url(url) is None:
        logger.warning("Rejected link with invalid url %r", url)
        raise InvalidLink(url)

    async with _context(info).session() as db:
        link = await link_service.create_link(db, url, description)
    return LinkType.from_model(link)


async def resolve_post_comment_on_link(
    info: strawberry.Info, link_id: str, body: str
) -> CommentType:
    parsed_link_id = parse_record_id(link_id)
    if parsed_link_id is None:
        logger.warning("Rejected comment on malformed link id %r", link_id)
        raise LinkNotFound(link_id)

    if len(body) < 1:
        raise EmptyComment()

    try:
        async with _context(info).session() as db:
            comment = await comment_service.add_comment(db, parsed_link_id, body)
    except StoreError as exc:
        if exc.kind is StoreErrorKind.REFERENCE_VIOLATED:
            raise LinkNotFound(link_id) from exc
        raise

    # Later mutations in the same document may read this link's comments.
    _context(info).loaders.comments_by_link_loader.clear(parsed_link_id)
    logger.info("Created comment %s on link %s", comment.id, parsed_link_id)
    return CommentType.from_model(comment)
