from dataclasses import dataclass
import logging
from typing import Protocol

from domain.errors import UserNotFound
from domain.models import User


logger = logging.getLogger(__name__)


@dataclass
class LoginInputData:
    username: str
    password: str


@dataclass
class LoginOutputData:
    username: str
    use_case_failed: bool = False


class LoginDataAccess(Protocol):
    async def get(self, username: str) -> User: ...


class CurrentUser(Protocol):
    """Who is logged in for the session running the use case."""

    def get_current_username(self) -> str | None: ...

    def set_current_username(self, username: str | None) -> None: ...


class LoginOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: LoginOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...

    def switch_to_signup_view(self) -> None: ...


class LoginInteractor:
    def __init__(
        self,
        user_data_access: LoginDataAccess,
        current_user: CurrentUser,
        presenter: LoginOutputBoundary,
    ) -> None:
        self.user_data_access = user_data_access
        self.current_user = current_user
        self.presenter = presenter

    async def execute(self, input_data: LoginInputData) -> None:
        username = input_data.username.strip()
        try:
            user = await self.user_data_access.get(username)
        except UserNotFound:
            self.presenter.prepare_fail_view(f"{username}: Account does not exist.")
            return

        if not user.check_password(input_data.password):
            logger.info("Wrong password for %s", username)
            self.presenter.prepare_fail_view(f'Incorrect password for "{username}".')
            return

        self.current_user.set_current_username(user.username)
        logger.info("%s logged in", user.username)
        self.presenter.prepare_success_view(LoginOutputData(username=user.username))

    def switch_to_signup_view(self) -> None:
        self.presenter.switch_to_signup_view()
