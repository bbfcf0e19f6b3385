import hashlib
import re

import pytest

from api.features.auth.exceptions import MalformedPasswordHashError
from api.features.auth.hasher import PasswordHasher

STORED_FORMAT = re.compile(r"^[0-9a-f]{128}\.[0-9a-f]{32}$")


@pytest.fixture
def hasher():
    return PasswordHasher()


@pytest.mark.asyncio
async def test_hash_then_verify(hasher):
    stored = await hasher.hash("correct horse battery staple")

    assert STORED_FORMAT.match(stored)
    assert await hasher.verify("correct horse battery staple", stored) is True


@pytest.mark.asyncio
async def test_wrong_password_does_not_verify(hasher):
    stored = await hasher.hash("s3cret")

    assert await hasher.verify("s3cret!", stored) is False
    assert await hasher.verify("", stored) is False


@pytest.mark.asyncio
async def test_hashing_is_salted(hasher):
    first = await hasher.hash("same-password")
    second = await hasher.hash("same-password")

    assert first != second
    assert first.split(".")[1] != second.split(".")[1]


def test_salt_hex_text_is_the_scrypt_salt(hasher):
    stored = hasher.hash_sync("pässwörd")
    derived_hex, salt_hex = stored.split(".")

    expected = hashlib.scrypt(
        "pässwörd".encode("utf-8"), salt=salt_hex.encode("ascii"), n=16384, r=8, p=1, dklen=64
    )
    assert derived_hex == expected.hex()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "stored",
    ["no-separator-here", ".abcd", "abcd.", "zz-not-hex.0011", "00ff.not-hex-salt"],
)
async def test_malformed_stored_hash_raises(hasher, stored):
    with pytest.raises(MalformedPasswordHashError):
        await hasher.verify("anything", stored)


def test_truncated_digest_does_not_verify(hasher):
    stored = hasher.hash_sync("password")
    derived_hex, salt_hex = stored.split(".")

    assert hasher.verify_sync("password", f"{derived_hex[:64]}.{salt_hex}") is False
