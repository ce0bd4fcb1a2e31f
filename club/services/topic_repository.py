from __future__ import annotations

import logging
from typing import Iterable

from sqlalchemy import update
from sqlalchemy.orm import Query, Session, selectinload

from club.models.common import utcnow
from club.models.topic import Topic

logger = logging.getLogger(__name__)


def default_query(db: Session) -> Query:
    """Live topics with author and last replier loaded up front."""
    return (
        db.query(Topic)
        .filter(Topic.is_delete.is_(False))
        .options(selectinload(Topic.create_user), selectinload(Topic.last_reply_user))
    )


def get_topic(db: Session, topic_id: int) -> Topic | None:
    return default_query(db).filter(Topic.id == topic_id).one_or_none()


def get_live_topic_for_update(db: Session, topic_id: int) -> Topic | None:
    return db.query(Topic).filter(Topic.id == topic_id, Topic.is_delete.is_(False)).one_or_none()


def add_topic(db: Session, *, category: str, title: str, content: str, create_user_id: int) -> Topic:
    now = utcnow()
    topic = Topic(
        category=category,
        title=title,
        content=content,
        create_user_id=create_user_id,
        create_date=now,
        update_date=now,
    )
    db.add(topic)
    db.commit()
    db.refresh(topic)
    return topic


def update_topic(db: Session, topic: Topic, *, category: str, title: str, content: str) -> Topic:
    topic.category = category
    topic.title = title
    topic.content = content
    topic.update_date = utcnow()
    db.add(topic)
    db.commit()
    db.refresh(topic)
    return topic


def soft_delete_topic(db: Session, topic: Topic) -> Topic:
    topic.is_delete = True
    db.add(topic)
    db.commit()
    db.refresh(topic)
    return topic


def save_topic(db: Session, topic: Topic) -> Topic:
    db.add(topic)
    db.commit()
    db.refresh(topic)
    return topic


def increase_visit_count(db: Session, topic_id: int) -> int:
    """Bump the visit counter inside the database so concurrent visits are not lost."""
    result = db.execute(
        update(Topic)
        .where(Topic.id == topic_id)
        .values(visit_count=Topic.visit_count + 1)
        .execution_options(synchronize_session=False)
    )
    db.commit()
    return int(result.rowcount or 0)


def topics_by_ids(db: Session, topic_ids: Iterable[int]) -> list[Topic]:
    ids = list(topic_ids)
    if not ids:
        return []
    return default_query(db).filter(Topic.id.in_(ids)).all()
