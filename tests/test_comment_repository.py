import unittest
from datetime import datetime

import table_helpers as helpers
from app.domain.comments import AddedComment, CommentRepository, NewComment
from app.exceptions import AuthorizationError, NotFoundError
from app.repositories.comment_repository import CommentRepositorySQLAlchemy
from table_helpers import DatabaseTestCase


class TestCommentRepository(DatabaseTestCase):
    def setUp(self):
        super().setUp()
        helpers.add_user(id="user-123", username="SomeUser")
        helpers.add_thread(id="thread-123", owner="user-123")

    def _repository(self, id_generator=lambda: "123"):
        return CommentRepositorySQLAlchemy(self.db.session, id_generator)

    def test_is_instance_of_comment_repository(self):
        self.assertIsInstance(self._repository(), CommentRepository)

    def test_add_comment_persists_comment(self):
        new_comment = NewComment(
            content="some content",
            thread_id="thread-123",
            owner="user-123",
        )

        added_comment = self._repository().add_comment(new_comment)

        self.assertEqual(
            added_comment,
            AddedComment(id="comment-123", content="some content", owner="user-123"),
        )
        comments = helpers.get_comment_by_id(added_comment.id)
        self.assertEqual(len(comments), 1)
        self.assertFalse(comments[0].is_deleted)

    def test_verify_comment_owner_returns_1_for_owner(self):
        repository = self._repository()
        repository.add_comment(NewComment(
            content="some content",
            thread_id="thread-123",
            owner="user-123",
        ))

        result = repository.verify_comment_owner("comment-123", "user-123")

        self.assertTrue(result)
        self.assertEqual(result, 1)

    def test_verify_comment_owner_rejects_other_user(self):
        repository = self._repository()
        repository.add_comment(NewComment(
            content="some content",
            thread_id="thread-123",
            owner="user-123",
        ))

        with self.assertRaises(AuthorizationError):
            repository.verify_comment_owner("comment-123", "user-432")

    def test_verify_comment_owner_raises_not_found_for_missing_comment(self):
        with self.assertRaises(NotFoundError):
            self._repository().verify_comment_owner("comment-404", "user-123")

    def test_get_comments_by_thread_id_returns_comments_in_date_order(self):
        helpers.add_comment(
            id="comment-345",
            content="second comment",
            date=datetime(2023, 8, 17, 1, 0, 0),
        )
        helpers.add_comment(
            id="comment-123",
            content="first comment",
            date=datetime(2023, 8, 17, 0, 0, 0),
        )

        comments = self._repository().get_comments_by_thread_id("thread-123")

        self.assertEqual(comments, [
            {
                "id": "comment-123",
                "thread_id": "thread-123",
                "owner": "user-123",
                "username": "SomeUser",
                "date": datetime(2023, 8, 17, 0, 0, 0),
                "content": "first comment",
                "is_deleted": False,
            },
            {
                "id": "comment-345",
                "thread_id": "thread-123",
                "owner": "user-123",
                "username": "SomeUser",
                "date": datetime(2023, 8, 17, 1, 0, 0),
                "content": "second comment",
                "is_deleted": False,
            },
        ])

    def test_get_comments_by_thread_id_returns_empty_list(self):
        self.assertEqual(self._repository().get_comments_by_thread_id("thread-123"), [])

    def test_get_comments_by_thread_id_ignores_other_threads(self):
        helpers.add_thread(id="thread-456", owner="user-123")
        helpers.add_comment(id="comment-123", thread_id="thread-123")
        helpers.add_comment(id="comment-456", thread_id="thread-456")

        comments = self._repository().get_comments_by_thread_id("thread-456")

        self.assertEqual([c["id"] for c in comments], ["comment-456"])

    def test_verify_available_comment_in_thread_raises_when_thread_missing(self):
        with self.assertRaises(NotFoundError):
            self._repository().verify_available_comment_in_thread("thread-404", "comment-123")

    def test_verify_available_comment_in_thread_raises_when_comment_missing(self):
        with self.assertRaises(NotFoundError):
            self._repository().verify_available_comment_in_thread("thread-123", "comment-123")

    def test_verify_available_comment_in_thread_raises_for_comment_of_other_thread(self):
        helpers.add_thread(id="thread-456", owner="user-123")
        helpers.add_comment(id="comment-123", thread_id="thread-456")

        with self.assertRaises(NotFoundError):
            self._repository().verify_available_comment_in_thread("thread-123", "comment-123")

    def test_verify_available_comment_in_thread_returns_1(self):
        helpers.add_comment(id="comment-123", content="first comment")

        row_count = self._repository().verify_available_comment_in_thread(
            "thread-123", "comment-123"
        )

        self.assertEqual(row_count, 1)

    def test_delete_comment_by_id_raises_when_missing(self):
        with self.assertRaises(NotFoundError):
            self._repository().delete_comment_by_id("comment-123")

    def test_delete_comment_by_id_soft_deletes(self):
        helpers.add_comment(id="comment-123", content="first comment")

        row_count = self._repository().delete_comment_by_id("comment-123")

        self.assertEqual(row_count, 1)
        comments = helpers.get_comment_by_id("comment-123")
        self.assertEqual(len(comments), 1)
        self.assertTrue(comments[0].is_deleted)
        self.assertEqual(comments[0].content, "**komentar telah dihapus**")


if __name__ == "__main__":
    unittest.main()
