import logging
from datetime import datetime

from app.domain.replies import AddedReply, NewReply, ReplyRepository
from app.exceptions import AuthorizationError, NotFoundError
from app.models.comment_model import Comment
from app.models.reply_model import Reply
from app.models.user_model import User


DELETED_REPLY_CONTENT = "**balasan telah dihapus**"

logger = logging.getLogger(__name__)


class ReplyRepositorySQLAlchemy(ReplyRepository):
    def __init__(self, session, id_generator):
        self.session = session
        self.id_generator = id_generator

    def add_reply(self, new_reply: NewReply) -> AddedReply:
        reply = Reply(
            id=f"reply-{self.id_generator()}",
            comment_id=new_reply.comment_id,
            owner=new_reply.owner,
            content=new_reply.content,
            date=datetime.utcnow(),
        )
        added_reply = AddedReply(id=reply.id, content=reply.content, owner=reply.owner)

        self.session.add(reply)
        self.session.commit()
        return added_reply

    def verify_reply_owner(self, reply_id: str, user_id: str) -> int:
        owner = self.session.query(Reply.owner).filter(Reply.id == reply_id).scalar()
        if owner is None:
            raise NotFoundError("reply not found")

        if owner != user_id:
            logger.warning("User %s tried to modify reply %s", user_id, reply_id)
            raise AuthorizationError("you are not the owner of this reply")

        return 1

    def get_replies_by_thread_id(self, thread_id: str) -> list[dict]:
        rows = (
            self.session.query(
                Reply.id,
                Reply.comment_id,
                Reply.owner,
                User.username,
                Reply.date,
                Reply.content,
                Reply.is_deleted,
            )
            .join(Comment, Comment.id == Reply.comment_id)
            .join(User, User.id == Reply.owner)
            .filter(Comment.thread_id == thread_id)
            .order_by(Reply.date.asc())
            .all()
        )
        return [row._asdict() for row in rows]

    def verify_available_reply_in_comment(self, comment_id: str, reply_id: str) -> int:
        row_count = (
            self.session.query(Reply)
            .filter(Reply.id == reply_id, Reply.comment_id == comment_id)
            .count()
        )
        if not row_count:
            raise NotFoundError("reply not found")

        return row_count

    def delete_reply_by_id(self, reply_id: str) -> int:
        row_count = (
            self.session.query(Reply)
            .filter(Reply.id == reply_id)
            .update(
                {
                    Reply.is_deleted: True,
                    Reply.content: DELETED_REPLY_CONTENT,
                },
                synchronize_session=False,
            )
        )
        if not row_count:
            self.session.rollback()
            raise NotFoundError("reply not found")

        self.session.commit()
        return row_count
