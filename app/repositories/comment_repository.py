import logging
from datetime import datetime

from app.domain.comments import AddedComment, CommentRepository, NewComment
from app.exceptions import AuthorizationError, NotFoundError
from app.models.comment_model import Comment
from app.models.thread_model import Thread
from app.models.user_model import User


DELETED_COMMENT_CONTENT = "**komentar telah dihapus**"

logger = logging.getLogger(__name__)


class CommentRepositorySQLAlchemy(CommentRepository):
    def __init__(self, session, id_generator):
        self.session = session
        self.id_generator = id_generator

    def add_comment(self, new_comment: NewComment) -> AddedComment:
        comment = Comment(
            id=f"comment-{self.id_generator()}",
            thread_id=new_comment.thread_id,
            owner=new_comment.owner,
            content=new_comment.content,
            date=datetime.utcnow(),
        )
        added_comment = AddedComment(
            id=comment.id,
            content=comment.content,
            owner=comment.owner,
        )

        self.session.add(comment)
        self.session.commit()
        return added_comment

    def verify_comment_owner(self, comment_id: str, user_id: str) -> int:
        owner = (
            self.session.query(Comment.owner)
            .filter(Comment.id == comment_id)
            .scalar()
        )
        if owner is None:
            raise NotFoundError("comment not found")

        if owner != user_id:
            logger.warning("User %s tried to modify comment %s", user_id, comment_id)
            raise AuthorizationError("you are not the owner of this comment")

        return 1

    def get_comments_by_thread_id(self, thread_id: str) -> list[dict]:
        rows = (
            self.session.query(
                Comment.id,
                Comment.thread_id,
                Comment.owner,
                User.username,
                Comment.date,
                Comment.content,
                Comment.is_deleted,
            )
            .join(User, User.id == Comment.owner)
            .filter(Comment.thread_id == thread_id)
            .order_by(Comment.date.asc())
            .all()
        )
        return [row._asdict() for row in rows]

    def verify_available_comment_in_thread(self, thread_id: str, comment_id: str) -> int:
        thread = self.session.query(Thread.id).filter(Thread.id == thread_id).first()
        if not thread:
            raise NotFoundError("thread not found")

        row_count = (
            self.session.query(Comment)
            .filter(Comment.id == comment_id, Comment.thread_id == thread_id)
            .count()
        )
        if not row_count:
            raise NotFoundError("comment not found")

        return row_count

    def delete_comment_by_id(self, comment_id: str) -> int:
        row_count = (
            self.session.query(Comment)
            .filter(Comment.id == comment_id)
            .update(
                {
                    Comment.is_deleted: True,
                    Comment.content: DELETED_COMMENT_CONTENT,
                },
                synchronize_session=False,
            )
        )
        if not row_count:
            self.session.rollback()
            raise NotFoundError("comment not found")

        self.session.commit()
        return row_count
