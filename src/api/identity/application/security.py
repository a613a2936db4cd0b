"""Password hashing capability.

Uses bcrypt with per-hash salt generation. Hashing is deliberately slow and
is never cached or memoized.
"""

import bcrypt

DEFAULT_BCRYPT_ROUNDS = 12

# bcrypt only uses the first 72 bytes; recent releases reject longer input.
BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode()[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher:
    """IPasswordHasher implementation backed by bcrypt."""

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> None:
        """Initialize the hasher.

        Args:
            rounds: bcrypt work factor (log2 of the iteration count)
        """
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        """Hash a password using bcrypt.

        Args:
            plaintext: The plaintext password to hash

        Returns:
            The bcrypt hash as a string
        """
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(plaintext), salt).decode()

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Verify a password against its hash using constant-time comparison.

        Args:
            plaintext: The plaintext password to verify
            hashed: The bcrypt hash to verify against

        Returns:
            True if the password matches the hash, False otherwise
        """
        try:
            return bcrypt.checkpw(_encode(plaintext), hashed.encode())
        except ValueError:
            # Malformed or non-bcrypt hash
            return False
