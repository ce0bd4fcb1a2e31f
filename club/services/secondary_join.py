from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from sqlalchemy import desc, func
from sqlalchemy.orm import Query, Session

from club.models.comment import Comment
from club.models.topic import Topic
from club.models.user_collect import UserCollect
from club.services import pagination
from club.services.topic_repository import topics_by_ids

logger = logging.getLogger(__name__)


def order_by_source(topic_ids: Sequence[int], topics: Iterable[Topic]) -> List[Topic]:
    """Return ``topics`` in the order their ids appear in ``topic_ids``.

    An ``IN`` filter does not promise any row order, so the fetched rows are
    re-sorted against the secondary list. Topics whose id is not in the list
    are dropped, as are ids with no matching topic (deleted in between).
    """
    positions: dict[int, int] = {}
    for index, topic_id in enumerate(topic_ids):
        positions.setdefault(topic_id, index)
    matched = [t for t in topics if t.id in positions]
    return sorted(matched, key=lambda t: positions[t.id])


def fetch_in_source_order(db: Session, topic_ids: Sequence[int]) -> List[Topic]:
    if not topic_ids:
        return []
    return order_by_source(topic_ids, topics_by_ids(db, topic_ids))


def commented_topic_ids_query(db: Session, user_id: int) -> Query:
    """Distinct topic ids the user commented on, latest comment first."""
    last_comment_id = func.max(Comment.id).label("last_comment_id")
    return (
        db.query(Comment.topic_id, last_comment_id)
        .filter(Comment.create_user_id == user_id, Comment.is_delete.is_(False))
        .group_by(Comment.topic_id)
        .order_by(desc(last_comment_id), desc(Comment.topic_id))
    )


def collected_topic_ids_query(db: Session, user_id: int) -> Query:
    """Ids of live topics the user bookmarked, latest bookmark first."""
    return (
        db.query(UserCollect.topic_id)
        .join(Topic, Topic.id == UserCollect.topic_id)
        .filter(UserCollect.user_id == user_id, Topic.is_delete.is_(False))
        .order_by(UserCollect.create_date.desc(), UserCollect.id.desc())
    )


def recent_commented_topics(db: Session, user_id: int, count: int) -> List[Topic]:
    if count <= 0:
        return []
    rows = commented_topic_ids_query(db, user_id).limit(count).all()
    return fetch_in_source_order(db, [row.topic_id for row in rows])


def paged_topics_from_ids(db: Session, ids_query: Query, page_index: int, page_size: int):
    rows, total = pagination.paginate(ids_query, page_index, page_size)
    topic_ids = [row.topic_id for row in rows]
    logger.debug("secondary join page=%s ids=%s total=%s", page_index, topic_ids, total)
    return fetch_in_source_order(db, topic_ids), total
