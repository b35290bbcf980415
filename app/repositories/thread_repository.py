from datetime import datetime

from app.domain.threads import AddedThread, NewThread, ThreadRepository
from app.exceptions import NotFoundError
from app.models.thread_model import Thread
from app.models.user_model import User


class ThreadRepositorySQLAlchemy(ThreadRepository):
    def __init__(self, session, id_generator):
        self.session = session
        self.id_generator = id_generator

    def add_thread(self, new_thread: NewThread) -> AddedThread:
        thread = Thread(
            id=f"thread-{self.id_generator()}",
            title=new_thread.title,
            body=new_thread.body,
            owner=new_thread.owner,
            date=datetime.utcnow(),
        )
        added_thread = AddedThread(id=thread.id, title=thread.title, owner=thread.owner)

        self.session.add(thread)
        self.session.commit()
        return added_thread

    def verify_available_thread(self, thread_id: str) -> None:
        if not self.session.query(Thread.id).filter(Thread.id == thread_id).first():
            raise NotFoundError("thread not found")

    def get_thread_by_id(self, thread_id: str) -> dict:
        row = (
            self.session.query(
                Thread.id,
                Thread.title,
                Thread.body,
                Thread.date,
                User.username,
            )
            .join(User, User.id == Thread.owner)
            .filter(Thread.id == thread_id)
            .first()
        )
        if not row:
            raise NotFoundError("thread not found")

        return row._asdict()
