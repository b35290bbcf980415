from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class NewComment:
    content: str
    thread_id: str
    owner: str


@dataclass(frozen=True)
class AddedComment:
    id: str
    content: str
    owner: str


class CommentRepository(ABC):
    """Persistence contract for comments.

    Deleting a comment is a soft delete: the row stays, ``is_deleted`` is set
    and ``content`` is replaced by a placeholder. Reads return those rows as-is
    so callers never need to know the placeholder text.
    """

    @abstractmethod
    def add_comment(self, new_comment: NewComment) -> AddedComment:
        ...

    @abstractmethod
    def verify_comment_owner(self, comment_id: str, user_id: str) -> int:
        """Return 1 if ``user_id`` owns the comment.

        Raises:
            NotFoundError: the comment does not exist.
            AuthorizationError: the comment belongs to someone else.
        """

    @abstractmethod
    def get_comments_by_thread_id(self, thread_id: str) -> list[dict]:
        """Comments of a thread, earliest first, joined with the author's username."""

    @abstractmethod
    def verify_available_comment_in_thread(self, thread_id: str, comment_id: str) -> int:
        """Return 1 if the thread exists and holds the comment, else raise NotFoundError."""

    @abstractmethod
    def delete_comment_by_id(self, comment_id: str) -> int:
        """Soft-delete the comment and return the affected row count."""
