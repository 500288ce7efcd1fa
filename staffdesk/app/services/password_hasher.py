"""
Password Hasher

One-way hashing for account passwords and OTP codes.
"""

import asyncio

import bcrypt

# bcrypt only reads the first 72 bytes of a secret
BCRYPT_MAX_BYTES = 72


def _encode(secret: str) -> bytes:
    return secret.encode()[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """
    Salted bcrypt hashing with a tunable cost factor.

    Hashing is CPU-bound, so the async methods run bcrypt on a worker
    thread and leave the event loop free for other requests.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    @classmethod
    def from_config(cls, config) -> "PasswordHasher":
        return cls(rounds=config.BCRYPT_ROUNDS)

    def hash_sync(self, secret: str) -> str:
        return bcrypt.hashpw(_encode(secret), bcrypt.gensalt(self.rounds)).decode()

    def verify_sync(self, secret: str, digest: str) -> bool:
        """
        Check a secret against a stored digest.

        Returns False on mismatch. Raises ValueError only when the digest
        is not a bcrypt hash.
        """
        return bcrypt.checkpw(_encode(secret), digest.encode())

    async def hash(self, secret: str) -> str:
        return await asyncio.to_thread(self.hash_sync, secret)

    async def verify(self, secret: str, digest: str) -> bool:
        return await asyncio.to_thread(self.verify_sync, secret, digest)

    async def verify_dummy(self) -> None:
        """Spend one bcrypt check so a missing account costs the same as a wrong password"""
        await asyncio.to_thread(bcrypt.checkpw, b"dummy_password", bcrypt.gensalt(self.rounds))
