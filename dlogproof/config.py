"""
Proof parameters.

The curve is fixed by :pymod:`curve` (secp256k1); the Fiat-Shamir hash is
selectable by ``hashlib`` name.  Any fixed-output hash whose digest is at
least as long as the group order qualifies.  Prover and verifier must use
the same ``ProofConfig`` or every honest proof is rejected.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass

from .curve import ORDER
from .errors import ConfigurationError

# ── constants ───────────────────────────────────────────────────────────
DEFAULT_HASH = "sha256"

# participant ids are fed to the hash as signed 32-bit big-endian
PARTICIPANT_ID_BYTES = 4
PARTICIPANT_ID_MIN = -(1 << 31)
PARTICIPANT_ID_MAX = (1 << 31) - 1


@dataclass(frozen=True)
class ProofConfig:
    """Hash selection for challenge derivation."""

    hash_name: str = DEFAULT_HASH

    def __post_init__(self) -> None:
        try:
            h = hashlib.new(self.hash_name)
        except (ValueError, TypeError) as exc:
            raise ConfigurationError(
                f"unknown hash algorithm {self.hash_name!r}"
            ) from exc
        if h.digest_size == 0:
            raise ConfigurationError(
                f"{self.hash_name!r} is an extendable-output function; "
                "a fixed-length digest is required"
            )
        if h.digest_size * 8 < ORDER.bit_length():
            raise ConfigurationError(
                f"{self.hash_name!r} yields {h.digest_size * 8} bits, "
                f"need at least {ORDER.bit_length()}"
            )

    def new_hasher(self):
        """Fresh incremental hash context."""
        return hashlib.new(self.hash_name)

    @property
    def digest_bits(self) -> int:
        return self.new_hasher().digest_size * 8


DEFAULT_CONFIG = ProofConfig()
