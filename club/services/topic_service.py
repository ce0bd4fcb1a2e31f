from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from club.models.topic import Topic
from club.services import pagination, secondary_join, topic_repository
from club.services.categories import CategoryResolver
from club.services.permissions import Actor, can_operate, is_admin
from club.services.results import (
    OperationResult,
    PagedResult,
    not_found_failure,
    permission_failure,
    validation_failure,
)

logger = logging.getLogger(__name__)


class TopicService:
    """Topic operations for one request: storage handle, category registry and acting user."""

    def __init__(self, db: Session, categories: CategoryResolver, actor: Actor):
        self.db = db
        self.categories = categories
        self.actor = actor

    # mutations

    def add(self, category: str, title: str, content: str, create_user_id: int) -> OperationResult[int]:
        model = self.categories.resolve(category)
        if model is None:
            return validation_failure()
        topic = topic_repository.add_topic(
            self.db,
            category=model.key,
            title=title,
            content=content,
            create_user_id=create_user_id,
        )
        logger.info("topic_created id=%s user=%s category=%s", topic.id, create_user_id, model.key)
        return OperationResult.success(topic.id)

    def edit(self, topic_id: int, category: str, title: str, content: str) -> OperationResult[Topic]:
        model = self.categories.resolve(category)
        if model is None:
            return validation_failure()
        topic = topic_repository.get_live_topic_for_update(self.db, topic_id)
        if topic is None:
            return not_found_failure()
        if not can_operate(self.actor, topic):
            self._log_denied("edit", topic_id)
            return permission_failure()
        topic = topic_repository.update_topic(self.db, topic, category=model.key, title=title, content=content)
        logger.info("topic_edited id=%s user=%s", topic.id, self.actor.user_id)
        self.fill_model(topic)
        return OperationResult.success(topic)

    def delete(self, topic_id: int) -> OperationResult[Topic]:
        topic = topic_repository.get_live_topic_for_update(self.db, topic_id)
        if topic is None:
            return not_found_failure()
        if not can_operate(self.actor, topic):
            self._log_denied("delete", topic_id)
            return permission_failure()
        topic = topic_repository.soft_delete_topic(self.db, topic)
        logger.info("topic_deleted id=%s user=%s", topic.id, self.actor.user_id)
        self.fill_model(topic)
        return OperationResult.success(topic)

    def toggle_recommend(self, topic_id: int) -> OperationResult[Topic]:
        return self._toggle(topic_id, "recommend")

    def toggle_top(self, topic_id: int) -> OperationResult[Topic]:
        return self._toggle(topic_id, "top")

    def toggle_lock(self, topic_id: int) -> OperationResult[Topic]:
        return self._toggle(topic_id, "lock")

    def increase_visit_count(self, topic_id: int) -> None:
        topic_repository.increase_visit_count(self.db, topic_id)

    # reads

    def get(self, topic_id: int) -> Optional[Topic]:
        topic = topic_repository.get_topic(self.db, topic_id)
        self.fill_model(topic)
        return topic

    def query(
        self,
        category: str | None,
        recommend: bool | None,
        page_index: int,
        page_size: int,
    ) -> PagedResult[Topic]:
        page_index, page_size = pagination.normalize_page(page_index, page_size)
        q = topic_repository.default_query(self.db)
        if category and category.strip():
            q = q.filter(Topic.category == category.strip())
        if recommend is not None:
            q = q.filter(Topic.recommend.is_(bool(recommend)))
        q = q.order_by(Topic.top.desc(), Topic.id.desc())
        topics, total = pagination.paginate(q, page_index, page_size)
        self.fill_model(*topics)
        return PagedResult(topics, page_index, page_size, total)

    def query_recent_created_topic_list(self, count: int, user_id: int, exclude: Iterable[int] = ()) -> List[Topic]:
        if count <= 0:
            return []
        q = topic_repository.default_query(self.db).filter(Topic.create_user_id == user_id)
        excluded = [int(x) for x in exclude or ()]
        if excluded:
            q = q.filter(Topic.id.notin_(excluded))
        topics = q.order_by(Topic.id.desc()).limit(count).all()
        self.fill_model(*topics)
        return topics

    def query_recent_commented_topic_list(self, count: int, user_id: int) -> List[Topic]:
        topics = secondary_join.recent_commented_topics(self.db, user_id, count)
        self.fill_model(*topics)
        return topics

    def query_created_topic_list(self, user_id: int, page_index: int, page_size: int) -> PagedResult[Topic]:
        page_index, page_size = pagination.normalize_page(page_index, page_size)
        q = (
            topic_repository.default_query(self.db)
            .filter(Topic.create_user_id == user_id)
            .order_by(Topic.id.desc())
        )
        topics, total = pagination.paginate(q, page_index, page_size)
        self.fill_model(*topics)
        return PagedResult(topics, page_index, page_size, total)

    def query_commented_topic_list(self, user_id: int, page_index: int, page_size: int) -> PagedResult[Topic]:
        page_index, page_size = pagination.normalize_page(page_index, page_size)
        topics, total = secondary_join.paged_topics_from_ids(
            self.db,
            secondary_join.commented_topic_ids_query(self.db, user_id),
            page_index,
            page_size,
        )
        self.fill_model(*topics)
        return PagedResult(topics, page_index, page_size, total)

    def query_collected_topic_list(self, user_id: int, page_index: int, page_size: int) -> PagedResult[Topic]:
        page_index, page_size = pagination.normalize_page(page_index, page_size)
        topics, total = secondary_join.paged_topics_from_ids(
            self.db,
            secondary_join.collected_topic_ids_query(self.db, user_id),
            page_index,
            page_size,
        )
        self.fill_model(*topics)
        return PagedResult(topics, page_index, page_size, total)

    def query_no_comment_topic_list(self, count: int) -> List[Topic]:
        if count <= 0:
            return []
        topics = (
            topic_repository.default_query(self.db)
            .filter(Topic.reply_count == 0)
            .order_by(Topic.id.desc())
            .limit(count)
            .all()
        )
        self.fill_model(*topics)
        return topics

    # helpers

    def fill_model(self, *topics: Topic | None) -> None:
        """Attach category descriptors, loading the category list once per call."""
        present = [t for t in topics if t is not None]
        if not present:
            return
        by_key = {c.key: c for c in self.categories.all()}
        for topic in present:
            topic.category_model = by_key.get(topic.category)

    def _toggle(self, topic_id: int, flag: str) -> OperationResult[Topic]:
        if not is_admin(self.actor):
            self._log_denied(f"toggle_{flag}", topic_id)
            return permission_failure()
        topic = topic_repository.get_live_topic_for_update(self.db, topic_id)
        if topic is None:
            return not_found_failure()
        setattr(topic, flag, not getattr(topic, flag))
        topic = topic_repository.save_topic(self.db, topic)
        logger.info("topic_%s_toggled id=%s value=%s user=%s", flag, topic.id, getattr(topic, flag), self.actor.user_id)
        self.fill_model(topic)
        return OperationResult.success(topic)

    def _log_denied(self, action: str, topic_id: int) -> None:
        logger.warning("topic_operation_denied action=%s id=%s user=%s", action, topic_id, self.actor.user_id)
