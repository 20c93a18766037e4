# authserver/models/user.py

from sqlalchemy import Column, Integer, String, UniqueConstraint
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    A registered account. One row per username; the password is kept only
    as a bcrypt_sha256 hash and rows are never updated after registration.
    """
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
    )

    id = Column(Integer, primary_key=True)
    username = Column(String(150), nullable=False)
    hashed_password = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"User(username={self.username!r})"
