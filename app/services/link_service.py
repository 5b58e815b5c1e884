"""
Link service — database access for the Link entity.

Service functions flush but do not commit; the unit of work is owned by
the caller (``GraphQLContext.session`` in the resolver layer).
"""
import logging

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Link

logger = logging.getLogger(__name__)


async def get_links(
    db: AsyncSession,
    filter_needle: str | None = None,
    skip: int = 0,
    take: int = 30,
) -> list[Link]:
    """
    Return one page of links ordered by id.

    When *filter_needle* is given, only links whose description or url
    contains it are returned.  Bounds on *skip* and *take* are the
    caller's concern; this function passes them straight to OFFSET/LIMIT.
    """
    q = select(Link)
    if filter_needle:
        q = q.where(
            or_(
                Link.description.contains(filter_needle, autoescape=True),
                Link.url.contains(filter_needle, autoescape=True),
            )
        )
    q = q.order_by(Link.id).offset(skip).limit(take)

    result = await db.execute(q)
    return list(result.scalars().all())


async def get_link(db: AsyncSession, link_id: int) -> Link | None:
    result = await db.execute(select(Link).where(Link.id == link_id))
    return result.scalar_one_or_none()


async def get_links_by_ids(db: AsyncSession, link_ids: list[int]) -> list[Link]:
    result = await db.execute(select(Link).where(Link.id.in_(link_ids)))
    return list(result.scalars().all())


async def create_link(db: AsyncSession, url: str, description: str) -> Link:
    """Insert a new link and return it with its store-assigned id."""
    link = Link(url=url, description=description)
    db.add(link)
    await db.flush()
    await db.refresh(link)
    logger.info("Created link %s (%s)", link.id, link.url)
    return link
