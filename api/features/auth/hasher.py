"""scrypt password hashing.

Stored format is ``<derived-key-hex>.<salt-hex>``. The hex text of the salt is
what goes into scrypt as the salt, which keeps hashes written by the earlier
Node.js service verifiable.
"""
from __future__ import annotations

import asyncio
import binascii
import hashlib
import hmac
import secrets
from functools import partial
from typing import Tuple

from api.features.auth.exceptions import MalformedPasswordHashError

SEPARATOR = "."


class PasswordHasher:
    """Derive and verify scrypt password hashes."""

    def __init__(
        self,
        n: int = 16384,
        r: int = 8,
        p: int = 1,
        key_length: int = 64,
        salt_bytes: int = 16,
    ) -> None:
        self.n = n
        self.r = r
        self.p = p
        self.key_length = key_length
        self.salt_bytes = salt_bytes

    def _derive(self, password: str, salt_hex: str) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt_hex.encode("ascii"),
            n=self.n,
            r=self.r,
            p=self.p,
            # 128 * n * r * p bytes of working memory, plus headroom
            maxmem=256 * self.n * self.r * self.p,
            dklen=self.key_length,
        )

    @staticmethod
    def split(stored: str) -> Tuple[bytes, str]:
        """Split a stored hash into the derived key bytes and the salt hex."""
        if not isinstance(stored, str) or SEPARATOR not in stored:
            raise MalformedPasswordHashError("missing separator")
        derived_hex, salt_hex = stored.split(SEPARATOR, 1)
        if not derived_hex or not salt_hex:
            raise MalformedPasswordHashError("empty hash or salt")
        try:
            derived = binascii.unhexlify(derived_hex)
            binascii.unhexlify(salt_hex)
        except (binascii.Error, ValueError) as e:
            raise MalformedPasswordHashError(f"invalid hex: {e}") from e
        return derived, salt_hex

    def hash_sync(self, password: str) -> str:
        salt_hex = secrets.token_hex(self.salt_bytes)
        derived = self._derive(password, salt_hex)
        return f"{derived.hex()}{SEPARATOR}{salt_hex}"

    def verify_sync(self, supplied_password: str, stored: str) -> bool:
        expected, salt_hex = self.split(stored)
        supplied = self._derive(supplied_password, salt_hex)
        return hmac.compare_digest(expected, supplied)

    async def hash(self, password: str) -> str:
        """Hash ``password`` with a fresh random salt."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(self.hash_sync, password))

    async def verify(self, supplied_password: str, stored: str) -> bool:
        """Check ``supplied_password`` against a stored hash in constant time.

        Raises MalformedPasswordHashError when ``stored`` cannot be parsed.
        """
        # Parse before handing off so format errors surface without a thread hop
        self.split(stored)
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, partial(self.verify_sync, supplied_password, stored)
        )
