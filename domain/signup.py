from dataclasses import dataclass
import logging
from typing import Protocol

from domain.models import User


logger = logging.getLogger(__name__)


@dataclass
class SignupInputData:
    username: str
    password: str
    repeat_password: str


@dataclass
class SignupOutputData:
    username: str
    use_case_failed: bool = False


class SignupDataAccess(Protocol):
    async def exists(self, username: str) -> bool: ...

    async def add(self, user: User) -> bool: ...


class SignupOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: SignupOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...

    def switch_to_login_view(self) -> None: ...


class SignupInteractor:
    def __init__(
        self,
        user_data_access: SignupDataAccess,
        presenter: SignupOutputBoundary,
    ) -> None:
        self.user_data_access = user_data_access
        self.presenter = presenter

    async def execute(self, input_data: SignupInputData) -> None:
        username = input_data.username.strip()
        if not username:
            self.presenter.prepare_fail_view("Username cannot be empty.")
        elif await self.user_data_access.exists(username):
            self.presenter.prepare_fail_view("User already exists.")
        elif not input_data.password.strip():
            self.presenter.prepare_fail_view("Password cannot be empty.")
        elif input_data.password != input_data.repeat_password:
            self.presenter.prepare_fail_view("Passwords don't match.")
        elif not await self.user_data_access.add(
            User.create(username, input_data.password)
        ):
            # Taken between the exists() check and the insert.
            self.presenter.prepare_fail_view("User already exists.")
        else:
            logger.info("Created account %s", username)
            self.presenter.prepare_success_view(SignupOutputData(username=username))

    def switch_to_login_view(self) -> None:
        self.presenter.switch_to_login_view()
