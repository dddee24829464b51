from jinja2 import Environment

from app.controllers import LoginController, SignupController
from app.html.base import Form, UnknownAction, View, field
from app.view_models import (
    LoginState,
    LoginViewModel,
    PropertyChangeEvent,
    SignupState,
    SignupViewModel,
)


class SignupView(View[SignupState]):
    template_name = "signup.html"

    def __init__(
        self, signup_view_model: SignupViewModel, *, environment: Environment
    ) -> None:
        super().__init__(signup_view_model, environment=environment)
        self.signup_controller: SignupController | None = None

    def set_signup_controller(self, signup_controller: SignupController) -> None:
        self.signup_controller = signup_controller

    async def act(self, action: str, form: Form) -> None:
        assert self.signup_controller is not None
        match action:
            case "sign-up":
                state = self.state
                state.username = field(form, "username")
                state.password = field(form, "password")
                state.repeat_password = field(form, "repeat_password")
                self.view_model.set_state(state)
                await self.signup_controller.execute(
                    state.username, state.password, state.repeat_password
                )
            case "to-login":
                self.signup_controller.switch_to_login_view()
            case _:
                raise UnknownAction(action)


class LoginView(View[LoginState]):
    template_name = "login.html"

    def __init__(
        self, login_view_model: LoginViewModel, *, environment: Environment
    ) -> None:
        super().__init__(login_view_model, environment=environment)
        self.login_controller: LoginController | None = None
        self.username = ""

    def set_login_controller(self, login_controller: LoginController) -> None:
        self.login_controller = login_controller

    def property_change(self, event: PropertyChangeEvent) -> None:
        state: LoginState = event.new_value
        self.username = state.username

    async def act(self, action: str, form: Form) -> None:
        assert self.login_controller is not None
        match action:
            case "log-in":
                state = self.state
                state.username = field(form, "username")
                state.password = field(form, "password")
                self.view_model.set_state(state)
                await self.login_controller.execute(state.username, state.password)
            case "to-signup":
                self.login_controller.switch_to_signup_view()
            case _:
                raise UnknownAction(action)
