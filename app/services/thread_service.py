import logging

from app.domain.threads import AddedThread, NewThread


logger = logging.getLogger(__name__)


class AddThreadUseCase:
    def __init__(self, *, thread_repository):
        self.thread_repository = thread_repository

    def execute(self, new_thread: NewThread) -> AddedThread:
        added_thread = self.thread_repository.add_thread(new_thread)
        logger.info("Thread %s added by %s", added_thread.id, added_thread.owner)
        return added_thread


def _serialize_reply(reply):
    return {
        "id": reply["id"],
        "content": reply["content"],
        "date": reply["date"],
        "username": reply["username"],
    }


def _serialize_comment(comment, replies):
    return {
        "id": comment["id"],
        "username": comment["username"],
        "date": comment["date"],
        "content": comment["content"],
        "replies": replies,
    }


class GetThreadUseCase:
    """Builds the public view of a thread with its comments and their replies.

    Deleted comments and replies keep the placeholder content the repositories
    return. Ownership and deletion flags are left out of the result.
    """

    def __init__(self, *, thread_repository, comment_repository, reply_repository):
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    def execute(self, thread_id: str) -> dict:
        thread = self.thread_repository.get_thread_by_id(thread_id)
        comments = self.comment_repository.get_comments_by_thread_id(thread_id)
        replies = self.reply_repository.get_replies_by_thread_id(thread_id)

        replies_by_comment = {}
        for reply in replies:
            replies_by_comment.setdefault(reply["comment_id"], []).append(
                _serialize_reply(reply)
            )

        return {
            **thread,
            "comments": [
                _serialize_comment(comment, replies_by_comment.get(comment["id"], []))
                for comment in comments
            ],
        }
