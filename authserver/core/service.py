# authserver/core/service.py

import logging

from .outcomes import LoginOutcome, RegisterOutcome
from .security import dummy_verify, get_password_hash, verify_password
from .store import CredentialStore
from ..models.user import User


logger = logging.getLogger("authserver.auth")


class AuthService:
    """
    Registration and login against an injected credential store.
    Both operations are single request/response calls with no retained session;
    storage failures propagate as StorageError.
    """

    def __init__(self, store: CredentialStore):
        self._store = store

    @property
    def store(self) -> CredentialStore:
        return self._store

    def register(self, username: str, password: str) -> RegisterOutcome:
        if not username:
            raise ValueError("Username must not be empty")

        candidate = User(username=username, hashed_password=get_password_hash(password))
        if not self._store.insert_if_absent(candidate):
            logger.info("Registration rejected, username %r is taken", username)
            return RegisterOutcome.USERNAME_TAKEN

        logger.info("Registered user %r", username)
        return RegisterOutcome.REGISTERED

    def login(self, username: str, password: str) -> LoginOutcome:
        user = self._store.find_by_username(username)
        if user is None:
            # Spend the same hashing time as a real check.
            dummy_verify()
            logger.info("Login failed for %r", username)
            return LoginOutcome.INVALID_CREDENTIALS

        if not verify_password(password, user.hashed_password):
            logger.info("Login failed for %r", username)
            return LoginOutcome.INVALID_CREDENTIALS

        logger.info("Login succeeded for %r", username)
        return LoginOutcome.SUCCESS
