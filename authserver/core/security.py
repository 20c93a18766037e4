# authserver/core/security.py

from passlib.context import CryptContext


# bcrypt_sha256 digests the whole password before bcrypt, so passwords longer
# than 72 bytes and passwords containing NUL are compared in full.
pwd_context = CryptContext(schemes=["bcrypt_sha256"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognized or malformed hash in the store.
        return False


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def dummy_verify() -> None:
    pwd_context.dummy_verify()
