"""
Comment service — append-only comment storage.

Comments cannot be edited or deleted.  The existence of the target link is
not checked up front: the ``comments.link_id`` foreign key is the single
source of truth, and a violation comes back as a ``StoreError`` tagged
``REFERENCE_VIOLATED``.
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.errors import StoreError, classify_integrity_error
from app.models import Comment

logger = logging.getLogger(__name__)


async def get_comment(db: AsyncSession, comment_id: int) -> Comment | None:
    result = await db.execute(select(Comment).where(Comment.id == comment_id))
    return result.scalar_one_or_none()


async def get_comments_for_links(db: AsyncSession, link_ids: list[int]) -> list[Comment]:
    """Return every comment attached to any of *link_ids*, oldest first."""
    q = select(Comment).where(Comment.link_id.in_(link_ids)).order_by(Comment.id)
    result = await db.execute(q)
    return list(result.scalars().all())


async def add_comment(db: AsyncSession, link_id: int, body: str) -> Comment:
    """
    Insert a comment on *link_id* and return it.

    Raises ``StoreError`` when the insert violates an integrity constraint;
    the session must be rolled back by the caller in that case.
    """
    comment = Comment(body=body, link_id=link_id)
    db.add(comment)
    try:
        await db.flush()
    except IntegrityError as exc:
        kind = classify_integrity_error(exc)
        logger.warning("Comment insert on link %s rejected by store: %s", link_id, kind.value)
        raise StoreError(kind, str(exc.orig)) from exc

    await db.refresh(comment)
    return comment
