import logging

from app.domain.replies import AddedReply, NewReply


logger = logging.getLogger(__name__)


class AddReplyUseCase:
    def __init__(self, *, comment_repository, reply_repository):
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    def execute(self, new_reply: NewReply) -> AddedReply:
        self.comment_repository.verify_available_comment_in_thread(
            new_reply.thread_id,
            new_reply.comment_id,
        )
        added_reply = self.reply_repository.add_reply(new_reply)

        logger.info("Reply %s added to %s", added_reply.id, new_reply.comment_id)
        return added_reply


class DeleteReplyUseCase:
    def __init__(self, *, comment_repository, reply_repository):
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    def execute(self, thread_id: str, comment_id: str, reply_id: str, owner: str) -> None:
        self.comment_repository.verify_available_comment_in_thread(thread_id, comment_id)
        self.reply_repository.verify_available_reply_in_comment(comment_id, reply_id)
        self.reply_repository.verify_reply_owner(reply_id, owner)
        self.reply_repository.delete_reply_by_id(reply_id)

        logger.info("Reply %s deleted by %s", reply_id, owner)
