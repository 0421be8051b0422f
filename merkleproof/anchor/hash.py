"""Hash primitives for leaf and internal-node digests.

Digests are raw bytes. The primitive is chosen by name from a registry:

    sha256  hashlib SHA-256, 32 bytes (default)
    blake3  BLAKE3, 32 bytes
    dual    SHA-256 || BLAKE3, 64 bytes (byte form of the dual hash)

Node hashing is hash_data(left || right); operand order matters.
"""
import hashlib
from typing import Callable

import blake3

from ..core.constants import DEFAULT_HASH_ALGORITHM, STR_ENCODING

HashFn = Callable[[bytes], bytes]


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def _blake3(data: bytes) -> bytes:
    return blake3.blake3(data).digest()


def _dual(data: bytes) -> bytes:
    return _sha256(data) + _blake3(data)


_ALGORITHMS: dict[str, HashFn] = {
    "sha256": _sha256,
    "blake3": _blake3,
    "dual": _dual,
}


def register_algorithm(name: str, fn: HashFn) -> None:
    """Register a digest function under name.

    fn must be deterministic and return digests of one fixed length.

    Raises:
        ValueError: If name is already registered
    """
    if name in _ALGORITHMS:
        raise ValueError(f"Hash algorithm already registered: {name}")
    _ALGORITHMS[name] = fn


def get_algorithm(name: str) -> HashFn:
    """Return the digest function registered under name.

    Raises:
        ValueError: If algorithm is not supported
    """
    try:
        return _ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name}") from None


def algorithms() -> list[str]:
    """Names of all registered algorithms, sorted."""
    return sorted(_ALGORITHMS)


def digest_size(algorithm: str = DEFAULT_HASH_ALGORITHM) -> int:
    """Length in bytes of digests produced by algorithm."""
    return len(get_algorithm(algorithm)(b""))


def to_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    """Coerce leaf data to bytes. Strings are UTF-8 encoded.

    Raises:
        TypeError: For any other input type
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(STR_ENCODING)
    raise TypeError(f"Leaf data must be bytes or str, got {type(data).__name__}")


def hash_data(data: bytes | str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> bytes:
    """Digest of one byte sequence. Pure function, accepts empty input.

    Args:
        data: Raw leaf bytes (str is UTF-8 encoded)
        algorithm: Registered algorithm name

    Returns:
        Digest bytes
    """
    return get_algorithm(algorithm)(to_bytes(data))


def hash_concat(left: bytes, right: bytes, algorithm: str = DEFAULT_HASH_ALGORITHM) -> bytes:
    """Digest of left || right, left operand first.

    hash_concat(a, b) != hash_concat(b, a) for a != b.
    """
    return get_algorithm(algorithm)(to_bytes(left) + to_bytes(right))


def digest_hex(value) -> str | None:
    """Hex of a bytes-like digest, None for anything else."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return None
