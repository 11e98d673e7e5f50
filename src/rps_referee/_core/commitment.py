# Area: Core
"""
rps_referee._core.commitment — Commit-reveal for the opponent's move
====================================================================

The opponent's move is bound to a fresh secret key with an HMAC before
the human is asked to move. The digest is published at once; the key is
released only after the human has moved, so anyone can recompute the
digest and confirm the opponent's move was fixed in advance.

Keys come from ``secrets`` (the operating system CSPRNG). Keys and
digests are exchanged as lowercase hex.
"""

from __future__ import annotations
import hashlib
import hmac
import logging
import secrets
from typing import Final, Union

from .moves import Move
from ..errors import ProtocolOrderError, RandomSourceUnavailableError

logger = logging.getLogger("rps_referee.commitment")

DEFAULT_KEY_BYTES: Final[int] = 32
MIN_KEY_BYTES: Final[int] = 16
MAX_KEY_BYTES: Final[int] = 1024
DEFAULT_DIGEST_ALGORITHM: Final[str] = "sha3_256"


def check_key_bytes(num_bytes: int) -> int:
    """Return ``num_bytes`` if it is a usable key length, else raise ValueError."""
    if isinstance(num_bytes, bool) or not isinstance(num_bytes, int):
        raise ValueError(f"key length must be an int, got {num_bytes!r}")
    if not MIN_KEY_BYTES <= num_bytes <= MAX_KEY_BYTES:
        raise ValueError(
            f"key length must be {MIN_KEY_BYTES}..{MAX_KEY_BYTES} bytes, got {num_bytes}"
        )
    return num_bytes


def normalize_digest_algorithm(name: str) -> str:
    """
    Lowercase ``name`` and check it is a fixed-length hashlib algorithm.

    Raises:
        ValueError: If the algorithm is not guaranteed by hashlib or is a
            variable-length ``shake_*`` function
    """
    value = name.lower()
    if value not in hashlib.algorithms_guaranteed or value.startswith("shake_"):
        raise ValueError(f"unsupported digest algorithm: {name}")
    return value


def generate_key(num_bytes: int = DEFAULT_KEY_BYTES) -> bytes:
    """Return ``num_bytes`` bytes from the CSPRNG."""
    check_key_bytes(num_bytes)
    try:
        return secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise RandomSourceUnavailableError("key generation", exc) from exc


def compute_digest(
    key: bytes,
    move_name: str,
    algorithm: str = DEFAULT_DIGEST_ALGORITHM,
) -> str:
    """HMAC of the move name under ``key``, as lowercase hex."""
    return hmac.new(key, move_name.encode("utf-8"), algorithm).hexdigest()


def verify_commitment(
    *,
    expected_digest: str,
    key: Union[bytes, str],
    move_name: str,
    algorithm: str = DEFAULT_DIGEST_ALGORITHM,
) -> bool:
    """
    Recompute the digest for a revealed key and move and compare it.

    Args:
        expected_digest: Digest published before the human moved (hex)
        key: Revealed key, raw bytes or hex string
        move_name: The opponent's move as announced after the round
        algorithm: hashlib algorithm name used for the HMAC

    Returns:
        True if the digest matches

    Raises:
        ValueError: If ``key`` or ``expected_digest`` is not valid hex, or
            the algorithm is unsupported
    """
    algorithm = normalize_digest_algorithm(algorithm)
    raw_key = bytes.fromhex(key) if isinstance(key, str) else key
    expected = bytes.fromhex(expected_digest)
    computed = hmac.new(raw_key, move_name.encode("utf-8"), algorithm).digest()
    return hmac.compare_digest(expected, computed)


class Commitment:
    """
    One-round commitment to a move.

    The key is generated on construction and the digest computed
    immediately. ``reveal()`` is refused until ``close()`` records that
    the counterpart has committed to their own move. An unsupported
    algorithm or key length raises ValueError before any key exists.
    """

    def __init__(
        self,
        move: Move,
        key_bytes: int = DEFAULT_KEY_BYTES,
        algorithm: str = DEFAULT_DIGEST_ALGORITHM,
    ):
        algorithm = normalize_digest_algorithm(algorithm)
        self._move = move
        self._algorithm = algorithm
        self._key = generate_key(key_bytes)
        self._digest = compute_digest(self._key, move.name, algorithm)
        self._closed = False
        logger.debug(f"Committed to a move with {algorithm}, digest {self._digest}")

    @property
    def digest(self) -> str:
        return self._digest

    @property
    def algorithm(self) -> str:
        return self._algorithm

    @property
    def move(self) -> Move:
        return self._move

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Record that the counterpart's move is in; the key may be revealed from now on."""
        self._closed = True

    def reveal(self) -> str:
        """Return the secret key as hex."""
        if not self._closed:
            raise ProtocolOrderError("reveal the key", "awaiting the human move")
        return self._key.hex()

    def verify(self, move_name: str) -> bool:
        """Check ``move_name`` against this commitment's digest."""
        return verify_commitment(
            expected_digest=self._digest,
            key=self._key,
            move_name=move_name,
            algorithm=self._algorithm,
        )
