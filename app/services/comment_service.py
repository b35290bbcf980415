import logging

from app.domain.comments import AddedComment, NewComment


logger = logging.getLogger(__name__)


class AddCommentUseCase:
    def __init__(self, *, thread_repository, comment_repository):
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    def execute(self, new_comment: NewComment) -> AddedComment:
        self.thread_repository.verify_available_thread(new_comment.thread_id)
        added_comment = self.comment_repository.add_comment(new_comment)

        logger.info("Comment %s added to %s", added_comment.id, new_comment.thread_id)
        return added_comment


class DeleteCommentUseCase:
    def __init__(self, *, comment_repository):
        self.comment_repository = comment_repository

    def execute(self, thread_id: str, comment_id: str, owner: str) -> None:
        self.comment_repository.verify_available_comment_in_thread(thread_id, comment_id)
        self.comment_repository.verify_comment_owner(comment_id, owner)
        self.comment_repository.delete_comment_by_id(comment_id)

        logger.info("Comment %s deleted by %s", comment_id, owner)
