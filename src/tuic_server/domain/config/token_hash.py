"""
Authentication token derivation.

The secret given on the command line is reduced to a 64-bit token with
SeaHash, the same non-cryptographic hash TUIC clients use, so both sides
derive identical tokens from identical secrets.
"""

from typing import Tuple

MASK_64 = 0xFFFF_FFFF_FFFF_FFFF

_DIFFUSE_PRIME = 0x6EED0E9DA4D94A4F

DEFAULT_SEEDS: Tuple[int, int, int, int] = (
    0x16F11FE89B0D677C,
    0xB480A793D8E6C86C,
    0x6FE2E5AAF078EBC9,
    0x14F994A4C5259381,
)


def diffuse(x: int) -> int:
    """Bijective 64-bit mixing step."""
    x = (x * _DIFFUSE_PRIME) & MASK_64
    x ^= (x >> 32) >> (x >> 60)
    return (x * _DIFFUSE_PRIME) & MASK_64


def seahash(data: bytes, seeds: Tuple[int, int, int, int] = DEFAULT_SEEDS) -> int:
    """
    Hash a byte string with SeaHash.

    Input is consumed in little-endian 8-byte words (the last one zero
    padded), fed round-robin into four lanes; the lanes are folded together
    with the input length.

    Args:
        data: Bytes to hash
        seeds: Initial lane values

    Returns:
        Unsigned 64-bit hash
    """
    lanes = list(seeds)
    for offset in range(0, len(data), 8):
        lane = (offset // 8) % 4
        word = int.from_bytes(data[offset:offset + 8], "little")
        lanes[lane] = diffuse(lanes[lane] ^ word)

    return diffuse(lanes[0] ^ lanes[1] ^ lanes[2] ^ lanes[3] ^ len(data))


def hash_token(secret: str) -> int:
    """Derive the authentication token from a secret string."""
    # surrogateescape restores the raw bytes of undecodable argv entries
    return seahash(secret.encode("utf-8", "surrogateescape"))
