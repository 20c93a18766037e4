# authserver/core/outcomes.py

from enum import Enum


class RegisterOutcome(str, Enum):
    REGISTERED = "Registration successful!"
    USERNAME_TAKEN = "Username already exists!"

    @property
    def ok(self) -> bool:
        return self is RegisterOutcome.REGISTERED

    @property
    def message(self) -> str:
        return self.value


class LoginOutcome(str, Enum):
    # Unknown usernames and wrong passwords share one outcome.
    SUCCESS = "Login successful!"
    INVALID_CREDENTIALS = "Invalid username or password!"

    @property
    def ok(self) -> bool:
        return self is LoginOutcome.SUCCESS

    @property
    def message(self) -> str:
        return self.value
