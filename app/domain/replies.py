from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class NewReply:
    content: str
    thread_id: str
    comment_id: str
    owner: str


@dataclass(frozen=True)
class AddedReply:
    id: str
    content: str
    owner: str


class ReplyRepository(ABC):

    @abstractmethod
    def add_reply(self, new_reply: NewReply) -> AddedReply:
        ...

    @abstractmethod
    def verify_reply_owner(self, reply_id: str, user_id: str) -> int:
        ...

    @abstractmethod
    def get_replies_by_thread_id(self, thread_id: str) -> list[dict]:
        """Replies to every comment of a thread, earliest first."""

    @abstractmethod
    def verify_available_reply_in_comment(self, comment_id: str, reply_id: str) -> int:
        ...

    @abstractmethod
    def delete_reply_by_id(self, reply_id: str) -> int:
        ...
