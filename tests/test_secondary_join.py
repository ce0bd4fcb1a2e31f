import os
import unittest
from types import SimpleNamespace

# Ensure settings can be initialized in test environments
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")

from club.services.secondary_join import order_by_source

from tests.base import TopicDbTestBase


class OrderBySourceTests(unittest.TestCase):
    def test_rows_follow_source_order(self):
        rows = [SimpleNamespace(id=i) for i in (1, 2, 3, 4)]
        ordered = order_by_source([3, 1, 4, 2], rows)
        self.assertEqual([r.id for r in ordered], [3, 1, 4, 2])

    def test_missing_rows_are_dropped(self):
        rows = [SimpleNamespace(id=5), SimpleNamespace(id=7)]
        ordered = order_by_source([7, 6, 5], rows)
        self.assertEqual([r.id for r in ordered], [7, 5])

    def test_empty_source(self):
        self.assertEqual(order_by_source([], [SimpleNamespace(id=1)]), [])


class CommentedTopicTests(TopicDbTestBase):
    def test_commented_list_follows_comment_order_not_id_order(self):
        author = self._create_user("author")
        reader = self._create_user("reader")
        topics = [self._create_topic(author, title=f"t{i}") for i in range(4)]
        for topic in reversed(topics):
            self._comment(reader, topic)

        page = self._service().query_commented_topic_list(reader.id, 1, 10)

        self.assertEqual([t.id for t in page.items], [topics[0].id, topics[1].id, topics[2].id, topics[3].id])
        self.assertEqual(page.total, 4)

    def test_repeat_comment_moves_topic_to_front_once(self):
        author = self._create_user("author")
        reader = self._create_user("reader")
        a = self._create_topic(author)
        b = self._create_topic(author)
        c = self._create_topic(author)
        self._comment(reader, a)
        self._comment(reader, b)
        self._comment(reader, c)
        self._comment(reader, a)

        page = self._service().query_commented_topic_list(reader.id, 1, 10)
        recent = self._service().query_recent_commented_topic_list(2, reader.id)

        self.assertEqual([t.id for t in page.items], [a.id, c.id, b.id])
        self.assertEqual(page.total, 3)
        self.assertEqual([t.id for t in recent], [a.id, c.id])

    def test_commented_list_pages_and_counts_distinct_topics(self):
        author = self._create_user("author")
        reader = self._create_user("reader")
        topics = [self._create_topic(author) for _ in range(5)]
        for topic in topics:
            self._comment(reader, topic)
            self._comment(reader, topic)
        self._comment(author, topics[0])
        self._comment(reader, self._create_topic(author), is_delete=True)
        service = self._service()

        first = service.query_commented_topic_list(reader.id, 1, 2)
        third = service.query_commented_topic_list(reader.id, 3, 2)

        self.assertEqual(first.total, 5)
        self.assertEqual(third.total, 5)
        self.assertEqual([t.id for t in first.items], [topics[4].id, topics[3].id])
        self.assertEqual([t.id for t in third.items], [topics[0].id])

    def test_deleted_topic_is_dropped_from_page(self):
        author = self._create_user("author")
        reader = self._create_user("reader")
        kept = self._create_topic(author)
        gone = self._create_topic(author, is_delete=True)
        self._comment(reader, kept)
        self._comment(reader, gone)

        page = self._service().query_commented_topic_list(reader.id, 1, 10)

        self.assertEqual([t.id for t in page.items], [kept.id])

    def test_user_without_comments_gets_empty_page(self):
        reader = self._create_user("reader")

        page = self._service().query_commented_topic_list(reader.id, 1, 10)

        self.assertEqual(page.items, [])
        self.assertEqual(page.total, 0)
        self.assertEqual(self._service().query_recent_commented_topic_list(5, reader.id), [])


class CollectedTopicTests(TopicDbTestBase):
    def test_collected_list_follows_bookmark_time(self):
        author = self._create_user("author")
        reader = self._create_user("reader")
        a = self._create_topic(author)
        b = self._create_topic(author)
        c = self._create_topic(author)
        self._collect(reader, b, minutes_ago=30)
        self._collect(reader, a, minutes_ago=5)
        self._collect(reader, c, minutes_ago=60)

        page = self._service().query_collected_topic_list(reader.id, 1, 10)

        self.assertEqual([t.id for t in page.items], [a.id, b.id, c.id])
        self.assertEqual(page.items[0].category_model.key, "go")

    def test_deleted_topics_are_excluded_before_counting(self):
        author = self._create_user("author")
        reader = self._create_user("reader")
        other = self._create_user("other")
        live = [self._create_topic(author) for _ in range(3)]
        dead = self._create_topic(author, is_delete=True)
        for minutes, topic in enumerate(live):
            self._collect(reader, topic, minutes_ago=minutes)
        self._collect(reader, dead, minutes_ago=100)
        self._collect(other, live[0])

        first = self._service().query_collected_topic_list(reader.id, 1, 2)
        second = self._service().query_collected_topic_list(reader.id, 2, 2)

        self.assertEqual(first.total, 3)
        self.assertEqual([t.id for t in first.items], [live[0].id, live[1].id])
        self.assertEqual([t.id for t in second.items], [live[2].id])

    def test_no_bookmarks(self):
        reader = self._create_user("reader")
        page = self._service().query_collected_topic_list(reader.id, 1, 10)
        self.assertEqual((page.items, page.total), ([], 0))
