"""
bcrypt password hasher adapter - Implements PasswordHasher protocol.

bcrypt embeds a random 16-byte salt and the cost factor in every hash
($2b$<cost>$<salt><digest>), so two hashes of the same password differ
and verification needs nothing but the stored string.

bcrypt only reads the first 72 bytes of its input. Longer passwords are
first reduced to a base64 SHA-256 digest (44 bytes) so that every byte
of the password still counts.
"""

import base64
import hashlib
import logging

import bcrypt

from src.domain.exceptions import HashingFailed

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72


def _prepare(plaintext: str) -> bytes:
    secret = plaintext.encode("utf-8", "surrogatepass")
    if len(secret) > _BCRYPT_MAX_BYTES:
        secret = base64.b64encode(hashlib.sha256(secret).digest())
    return secret


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via the bcrypt package.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, rounds: int = 10) -> None:
        """
        Initialize hasher with a bcrypt work factor.

        Args:
            rounds: bcrypt cost factor (log2 of iterations, 4-31)
        """
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash password with a fresh salt at the configured cost."""
        try:
            return bcrypt.hashpw(_prepare(plaintext), bcrypt.gensalt(rounds=self._rounds)).decode()
        except (TypeError, ValueError) as e:
            logger.error("Password hashing failed (rounds=%s): %s", self._rounds, e)
            raise HashingFailed("Password hashing failed") from e

    def verify(self, plaintext: str, hashed: str) -> bool:
        """
        Check password against a stored hash (constant-time via bcrypt).

        A malformed stored hash never verifies.
        """
        try:
            return bcrypt.checkpw(_prepare(plaintext), hashed.encode())
        except ValueError:
            return False
