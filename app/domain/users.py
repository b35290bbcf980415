from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RegisterUser:
    username: str
    password: str
    fullname: str


@dataclass(frozen=True)
class RegisteredUser:
    id: str
    username: str
    fullname: str


class UserRepository(ABC):

    @abstractmethod
    def verify_available_username(self, username: str) -> None:
        ...

    @abstractmethod
    def add_user(self, register_user: RegisterUser) -> RegisteredUser:
        ...

    @abstractmethod
    def get_password_by_username(self, username: str) -> str:
        ...

    @abstractmethod
    def get_id_by_username(self, username: str) -> str:
        ...
