from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class NewThread:
    title: str
    body: str
    owner: str


@dataclass(frozen=True)
class AddedThread:
    id: str
    title: str
    owner: str


class ThreadRepository(ABC):

    @abstractmethod
    def add_thread(self, new_thread: NewThread) -> AddedThread:
        ...

    @abstractmethod
    def verify_available_thread(self, thread_id: str) -> None:
        ...

    @abstractmethod
    def get_thread_by_id(self, thread_id: str) -> dict:
        """Return ``id``, ``title``, ``body``, ``date`` and the author's ``username``."""
