from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class UserLogin:
    username: str
    password: str


@dataclass(frozen=True)
class NewAuth:
    access_token: str
    refresh_token: str


class AuthenticationRepository(ABC):
    """Storage for refresh tokens that are still allowed to mint access tokens."""

    @abstractmethod
    def add_token(self, token: str) -> None:
        ...

    @abstractmethod
    def check_availability_token(self, token: str) -> None:
        ...

    @abstractmethod
    def delete_token(self, token: str) -> None:
        ...
