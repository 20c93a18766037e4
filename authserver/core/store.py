# authserver/core/store.py

from abc import ABC, abstractmethod
from threading import Lock
from typing import Optional
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from .errors import StorageError
from ..models.user import User


# -------------------------------
# Credential Store Interface
# -------------------------------

class CredentialStore(ABC):
    """
    Persistence boundary for user records keyed by username.
    """

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """
        Returns the stored record for `username`, or None. Never writes.
        """

    @abstractmethod
    def save(self, user: User) -> None:
        """
        Inserts a new record. Raises StorageError if it cannot be persisted,
        including when the username is already present.
        """

    @abstractmethod
    def insert_if_absent(self, user: User) -> bool:
        """
        Inserts `user` unless its username is taken, as one atomic step.
        Returns True when inserted, False when the username already exists.
        """


def _copy_user(user: User) -> User:
    return User(id=user.id, username=user.username, hashed_password=user.hashed_password)


# -------------------------------
# SQLAlchemy-backed Store
# -------------------------------

class SqlCredentialStore(CredentialStore):

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def _username_exists(self, db: Session, username: str) -> bool:
        return db.query(User.id).filter(User.username == username).first() is not None

    def find_by_username(self, username: str) -> Optional[User]:
        try:
            with self._session() as db:
                return db.query(User).filter(User.username == username).first()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to look up user {username!r}") from exc

    def save(self, user: User) -> None:
        with self._session() as db:
            try:
                db.add(user)
                db.commit()
            except SQLAlchemyError as exc:
                db.rollback()
                raise StorageError(f"Failed to save user {user.username!r}") from exc

    def insert_if_absent(self, user: User) -> bool:
        with self._session() as db:
            try:
                db.add(user)
                db.commit()
                return True
            except IntegrityError as exc:
                db.rollback()
                integrity_error = exc
            except SQLAlchemyError as exc:
                db.rollback()
                raise StorageError(f"Failed to save user {user.username!r}") from exc

            # Only uq_users_username means "taken"; any other constraint is a storage fault.
            try:
                taken = self._username_exists(db, user.username)
            except SQLAlchemyError as exc:
                raise StorageError(f"Failed to save user {user.username!r}") from exc
            if not taken:
                raise StorageError(f"Failed to save user {user.username!r}") from integrity_error
            return False


# -------------------------------
# In-memory Store
# -------------------------------

class InMemoryCredentialStore(CredentialStore):
    """
    Dict-backed store for tests and single-process use.
    Records are copied on the way in and out so callers never share state with the store.
    """

    def __init__(self):
        self._users: dict[str, User] = {}
        self._lock = Lock()
        self._next_id = 1

    def _insert(self, user: User) -> None:
        stored = _copy_user(user)
        stored.id = self._next_id
        self._next_id += 1
        self._users[user.username] = stored
        user.id = stored.id

    def find_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(username)
            return _copy_user(user) if user is not None else None

    def save(self, user: User) -> None:
        with self._lock:
            if user.username in self._users:
                raise StorageError(f"User {user.username!r} already exists")
            self._insert(user)

    def insert_if_absent(self, user: User) -> bool:
        with self._lock:
            if user.username in self._users:
                return False
            self._insert(user)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
