"""
Password encoder for stored credentials.

bcrypt through passlib; the cost factor comes from PASSWORD_BCRYPT_ROUNDS.
"""

from typing import Optional
from passlib.context import CryptContext
from app.core.config import settings

# bcrypt only looks at the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


class PasswordEncoder:
    """
    Encodes raw passwords and checks them against stored hashes.

    Hashes made with a different cost factor still verify.
    """

    def __init__(self, rounds: Optional[int] = None):
        self.rounds = rounds if rounds is not None else settings.PASSWORD_BCRYPT_ROUNDS
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=self.rounds,
        )

    @staticmethod
    def _secret(raw_password: str) -> bytes:
        return raw_password.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def encode(self, raw_password: str) -> str:
        return self.context.hash(self._secret(raw_password))

    def matches(self, raw_password: str, encoded_password: Optional[str]) -> bool:
        """
        Check a raw password against an encoded one.

        Returns False for empty or non-bcrypt hashes instead of raising.
        """
        if not encoded_password or self.context.identify(encoded_password) is None:
            return False
        return self.context.verify(self._secret(raw_password), encoded_password)


# Global instance
password_encoder = PasswordEncoder()
