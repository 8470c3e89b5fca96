"""
Fair Dice - Provably Fair Random Protocol

Commit-reveal scheme used for every round of a session:

1. The computer draws ``value`` in ``[0, range)`` and a fresh secret, and
   discloses ``tag = HMAC(secret, str(value))``.
2. The user contributes their own number.
3. The computer reveals ``value`` and ``secret``; anyone can recompute the
   tag and compare it with the one disclosed in step 1.

``combine`` adds the two contributions modulo the range. For a fixed
contribution ``k`` the map ``x -> (x + k) % n`` is a bijection, so neither
side can steer the sum as long as the other side's value is uniform.
"""

import hashlib
import hmac
import logging
import secrets

from src.engine.base import Commitment, Reveal
from src.engine.errors import IntegrityFault

logger = logging.getLogger(__name__)

MIN_SECRET_BYTES = 32
MIN_DIGEST_BYTES = 32


class FairRandomProtocol:
    """
    Issues commitments and checks reveals.

    An instance remembers the secrets it has issued and never hands out the
    same one twice. One instance is owned by each session.
    """

    def __init__(self, digest: str = "sha3_256", secret_bytes: int = MIN_SECRET_BYTES) -> None:
        self.digest = validate_digest(digest)
        if secret_bytes < MIN_SECRET_BYTES:
            raise ValueError(
                f"Secrets must be at least {MIN_SECRET_BYTES} bytes, got {secret_bytes}."
            )
        self.secret_bytes = secret_bytes
        self._issued: set[bytes] = set()

    def _fresh_secret(self) -> bytes:
        secret = secrets.token_bytes(self.secret_bytes)
        while secret in self._issued:
            secret = secrets.token_bytes(self.secret_bytes)
        self._issued.add(secret)
        return secret

    def compute_tag(self, secret: bytes, value: int) -> str:
        """HMAC of the decimal form of ``value`` keyed by ``secret``, as hex."""
        return hmac.new(secret, str(value).encode("ascii"), self.digest).hexdigest()

    def commit(self, range: int) -> Commitment:
        """
        Draw a value in ``[0, range)`` and bind it to a fresh secret.

        Args:
            range: Exclusive upper bound, must be positive

        Returns:
            Commitment whose ``tag`` may be disclosed right away

        Raises:
            ValueError: If ``range`` is not a positive integer
        """
        if isinstance(range, bool) or not isinstance(range, int) or range <= 0:
            raise ValueError(f"Commitment range must be a positive integer, got {range!r}.")

        value = secrets.randbelow(range)
        secret = self._fresh_secret()
        tag = self.compute_tag(secret, value)
        logger.debug("Committed to a value in 0..%d (HMAC=%s)", range - 1, tag)
        return Commitment(range=range, tag=tag, value=value, secret=secret)

    @staticmethod
    def reveal(commitment: Commitment) -> Reveal:
        """Disclose the held-back fields of ``commitment``."""
        return Reveal(value=commitment.value, secret=commitment.secret)

    def is_valid(self, tag: str, reveal: Reveal) -> bool:
        """Recompute the HMAC from ``reveal`` and compare it with ``tag``."""
        expected = self.compute_tag(reveal.secret, reveal.value)
        return hmac.compare_digest(expected, tag.lower())

    def verify(self, tag: str, reveal: Reveal) -> None:
        """
        Check a reveal against the tag disclosed at commit time.

        Raises:
            IntegrityFault: If the recomputed HMAC differs from ``tag``
        """
        if not self.is_valid(tag, reveal):
            logger.error("HMAC mismatch on reveal (disclosed %s)", tag)
            raise IntegrityFault(
                f"Revealed value {reveal.value} does not match the disclosed HMAC {tag}."
            )

    @staticmethod
    def combine(a: int, b: int, modulus: int) -> int:
        """
        Sum two contributions modulo ``modulus``.

        Returns:
            ``(a + b) % modulus``, always in ``[0, modulus)``

        Raises:
            ValueError: If ``modulus`` is not positive
        """
        if modulus <= 0:
            raise ValueError(f"Modulus must be positive, got {modulus}.")
        return (a + b) % modulus


def validate_digest(name: str) -> str:
    """
    Check that ``name`` is a hashlib algorithm with a digest of 256 bits or more.

    Raises:
        ValueError: If the algorithm is unknown or too short
    """
    try:
        size = hashlib.new(name).digest_size
    except (ValueError, TypeError):
        raise ValueError(f"Unknown hash algorithm {name!r}.") from None
    if size < MIN_DIGEST_BYTES:
        raise ValueError(
            f"Hash algorithm {name!r} produces {size * 8}-bit digests, "
            f"at least {MIN_DIGEST_BYTES * 8} required."
        )
    return name
