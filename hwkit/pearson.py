"""A 32-bit hash of strings built from Pearson hashing."""

from __future__ import annotations

# A fixed permutation of 0..255 used as the substitution table.
PEARSON_TABLE = bytes.fromhex(
    "92cb27be9ca6c59f5cf90d5ef4fafe856b004f"
    "2e1f5bc12b39710c5feba4ce802fe035e2349b"
    "70a1f62cda958a3d640497523e2808818eae42"
    "13387b576adbc3f101ee0af2d2a3d5f0bd1b14"
    "53edef904e6e0517255aa5d39a6cbc7624ddf8"
    "b94b96213a0e121a4c543fba75917e49aa2a86"
    "36157d0b41bbd82206264558430979ccd7c67c"
    "48373c8f46c82deacaff4db81ddee5a884fc89"
    "079de116d17fb0a7a0a2df9ee7b3206d99c0d4"
    "664078949e1c98237250556293 10b53b836f59".replace(" ", "")
    + "cfa93329b78cdc441e65020fd0e37368d6b6c9"
    "4761e6d988f7bff3b111698dac306019c4825d"
    "af18b2fdc25632cd0387abfb748bec677731e8"
    "4a7af5b4c7e463ad51"
)


def _pearson_byte(data: bytes, seed: int) -> int:
    first = data[0] if data else 0
    h = PEARSON_TABLE[(first + seed) % 256]
    for byte in data:
        h = PEARSON_TABLE[h ^ byte]
    return h


def pearson_hash32(text: str | bytes) -> int:
    """Return the 32-bit hash of ``text``; strings are hashed as UTF-8."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return int.from_bytes(bytes(_pearson_byte(data, seed) for seed in range(4)), "little")