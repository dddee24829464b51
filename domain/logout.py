from dataclasses import dataclass
import logging
from typing import Protocol

from domain.login import CurrentUser


logger = logging.getLogger(__name__)


@dataclass
class LogoutInputData:
    username: str


@dataclass
class LogoutOutputData:
    username: str
    use_case_failed: bool = False


class LogoutOutputBoundary(Protocol):
    def prepare_success_view(self, output_data: LogoutOutputData) -> None: ...

    def prepare_fail_view(self, error_message: str) -> None: ...


class LogoutInteractor:
    def __init__(
        self,
        current_user: CurrentUser,
        presenter: LogoutOutputBoundary,
    ) -> None:
        self.current_user = current_user
        self.presenter = presenter

    async def execute(self, input_data: LogoutInputData) -> None:
        if self.current_user.get_current_username() is None:
            self.presenter.prepare_fail_view("Nobody is logged in.")
            return
        self.current_user.set_current_username(None)
        logger.info("%s logged out", input_data.username)
        self.presenter.prepare_success_view(
            LogoutOutputData(username=input_data.username)
        )
