from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from authserver.core.errors import StorageError
from authserver.core.outcomes import LoginOutcome, RegisterOutcome
from authserver.core.service import AuthService
from authserver.core.store import InMemoryCredentialStore


def test_register_persists_new_user(service: AuthService) -> None:
    assert service.register("alice", "pw1") is RegisterOutcome.REGISTERED

    stored = service.store.find_by_username("alice")
    assert stored is not None
    assert stored.username == "alice"


def test_password_is_not_stored_verbatim(service: AuthService) -> None:
    service.register("alice", "pw1")

    stored = service.store.find_by_username("alice")
    assert stored.hashed_password != "pw1"
    assert stored.hashed_password.startswith("$bcrypt-sha256$")


def test_second_registration_is_rejected_and_keeps_original_password(service: AuthService) -> None:
    service.register("alice", "pw1")

    assert service.register("alice", "pw2") is RegisterOutcome.USERNAME_TAKEN
    assert service.login("alice", "pw1") is LoginOutcome.SUCCESS
    assert service.login("alice", "pw2") is LoginOutcome.INVALID_CREDENTIALS


def test_login_with_wrong_password_fails(service: AuthService) -> None:
    service.register("bob", "secret")

    assert service.login("bob", "Secret") is LoginOutcome.INVALID_CREDENTIALS


def test_unknown_user_gets_same_outcome_as_wrong_password(service: AuthService) -> None:
    service.register("bob", "secret")

    unknown = service.login("mallory", "secret")
    wrong = service.login("bob", "guess")
    assert unknown is wrong is LoginOutcome.INVALID_CREDENTIALS
    assert unknown.message == "Invalid username or password!"


def test_register_requires_username(service: AuthService) -> None:
    with pytest.raises(ValueError):
        service.register("", "pw")


def test_example_scenario_messages(service: AuthService) -> None:
    messages = [
        service.register("alice", "pw1").message,
        service.register("alice", "pw2").message,
        service.login("alice", "pw1").message,
        service.login("alice", "pw2").message,
    ]

    assert messages == [
        "Registration successful!",
        "Username already exists!",
        "Login successful!",
        "Invalid username or password!",
    ]


def test_outcome_flags() -> None:
    assert RegisterOutcome.REGISTERED.ok
    assert not RegisterOutcome.USERNAME_TAKEN.ok
    assert LoginOutcome.SUCCESS.ok
    assert not LoginOutcome.INVALID_CREDENTIALS.ok


def test_concurrent_registrations_for_one_username_register_once(service: AuthService) -> None:
    with ThreadPoolExecutor(max_workers=4) as pool:
        outcomes = list(pool.map(lambda i: service.register("race", f"pw{i}"), range(4)))

    assert outcomes.count(RegisterOutcome.REGISTERED) == 1
    assert outcomes.count(RegisterOutcome.USERNAME_TAKEN) == 3

    winner = outcomes.index(RegisterOutcome.REGISTERED)
    assert service.login("race", f"pw{winner}") is LoginOutcome.SUCCESS
    for loser in set(range(4)) - {winner}:
        assert service.login("race", f"pw{loser}") is LoginOutcome.INVALID_CREDENTIALS


def test_passwords_longer_than_72_bytes_are_compared_in_full(service: AuthService) -> None:
    prefix = "a" * 72
    service.register("alice", prefix + "RIGHT")

    assert service.login("alice", prefix + "RIGHT") is LoginOutcome.SUCCESS
    assert service.login("alice", prefix + "WRONG") is LoginOutcome.INVALID_CREDENTIALS
    assert service.login("alice", prefix) is LoginOutcome.INVALID_CREDENTIALS


def test_password_with_nul_byte(service: AuthService) -> None:
    assert service.register("bob", "a\x00b") is RegisterOutcome.REGISTERED

    assert service.login("bob", "a\x00b") is LoginOutcome.SUCCESS
    assert service.login("bob", "a") is LoginOutcome.INVALID_CREDENTIALS


class _FailingStore(InMemoryCredentialStore):
    def find_by_username(self, username):
        raise StorageError("connection lost")

    def insert_if_absent(self, user):
        raise StorageError("connection lost")


def test_storage_errors_propagate() -> None:
    service = AuthService(_FailingStore())

    with pytest.raises(StorageError):
        service.register("alice", "pw")
    with pytest.raises(StorageError):
        service.login("alice", "pw")
