"""
Credential Hasher

One-way password hashing with bcrypt. Digests are self-describing
(algorithm, cost and salt are encoded in the output), so no separate salt
storage is needed.
"""

import bcrypt


class HashingError(Exception):
    """bcrypt could not produce a digest"""


class PasswordHasher:
    """
    bcrypt password hasher.

    Business Rules:
    - Cost factor 12 by default (configurable; tests use the minimum of 4)
    - verify() never raises: malformed digests simply do not match
    - Comparison is constant-time (bcrypt.checkpw)
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Built up front; verify_dummy never hashes
        self._dummy_hash = self.hash("dummy_password")

    def hash(self, password: str) -> str:
        """
        Hash a plain text password.

        Raises:
            HashingError: bcrypt rejected the input (e.g. longer than 72 bytes)
                or the cost factor
        """
        try:
            digest = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(self.rounds))
        except (ValueError, TypeError) as exc:
            raise HashingError(str(exc)) from exc
        return digest.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain text password against a stored digest"""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            return False

    def verify_dummy(self, password: str) -> bool:
        """
        Spend the same work as verify() when there is no stored digest.

        Used when the account does not exist so that response timing does not
        reveal which emails are registered. Always returns False.
        """
        self.verify(password, self._dummy_hash)
        return False
