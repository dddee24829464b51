from dataclasses import dataclass
import logging
from typing import Protocol

from domain.errors import UserNotFound
from domain.models import User


logger = logging.getLogger(__name__)


@dataclass
class ChangePasswordInputData:
    username: str
    password: str


@dataclass
class ChangePasswordOutputData:
    username: str
    use_case_failed: bool = False


class ChangePasswordDataAccess(Protocol):
    async def get(self, username: str) -> User: ...

    async def change_password(self, user: User) -> None: ...


class ChangePasswordOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: ChangePasswordOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...


class ChangePasswordInteractor:
    def __init__(
        self,
        user_data_access: ChangePasswordDataAccess,
        presenter: ChangePasswordOutputBoundary,
    ) -> None:
        self.user_data_access = user_data_access
        self.presenter = presenter

    async def execute(self, input_data: ChangePasswordInputData) -> None:
        if not input_data.password.strip():
            self.presenter.prepare_fail_view("New password cannot be empty.")
            return

        try:
            user = await self.user_data_access.get(input_data.username)
        except UserNotFound:
            self.presenter.prepare_fail_view(
                f"{input_data.username}: Account does not exist."
            )
            return

        user.set_password(input_data.password)
        await self.user_data_access.change_password(user)
        logger.info("Changed password for %s", user.username)
        self.presenter.prepare_success_view(
            ChangePasswordOutputData(username=user.username)
        )
