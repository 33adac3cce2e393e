from dataclasses import dataclass

from linksaver.domain.entities import User
from linksaver.domain.failures import Failure


@dataclass
class RegisterInput:
    email: str
    password: str


@dataclass
class SignInInput:
    email: str
    password: str


@dataclass
class AuthOutput:
    user: User | None = None
    success: bool = False
    failure: Failure | None = None
    profile_written: bool = False
