"""
Fiat-Shamir challenge derivation.

The challenge for a proof over base point *B*, statement *Y* and
commitment *R* is

    c = H( sid ‖ be32(pid) ‖ enc(B) ‖ enc(Y) ‖ enc(R) )  mod q

where ``enc`` is the 65-byte uncompressed SEC 1 encoding and ``be32`` the
4-byte big-endian two's-complement encoding.  No domain tag or length
prefix is added: this byte layout is the interoperability contract
between prover and verifier, and any change to it (compression mode,
integer width, point order) makes honest proofs fail.

Binding the session and participant into the hash is what stops a proof
from being replayed in another protocol run or attributed to another
party.
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

from .curve import Scalar, Point
from .config import (
    DEFAULT_CONFIG,
    PARTICIPANT_ID_BYTES,
    PARTICIPANT_ID_MIN,
    PARTICIPANT_ID_MAX,
    ProofConfig,
)
from .errors import ChallengeDerivationError

logger = logging.getLogger(__name__)


# ── encoders ────────────────────────────────────────────────────────────
def encode_session_id(session_id: Union[str, bytes]) -> bytes:
    if isinstance(session_id, str):
        return session_id.encode("utf-8")
    if isinstance(session_id, (bytes, bytearray)):
        return bytes(session_id)
    raise TypeError(
        f"session_id must be str or bytes, not {type(session_id).__name__}"
    )


def encode_participant_id(participant_id: int) -> bytes:
    # bool is an int subclass but never a meaningful participant id
    if not isinstance(participant_id, int) or isinstance(participant_id, bool):
        raise TypeError(
            "participant_id must be int, "
            f"not {type(participant_id).__name__}"
        )
    if not PARTICIPANT_ID_MIN <= participant_id <= PARTICIPANT_ID_MAX:
        raise ValueError(
            f"participant_id {participant_id} does not fit a signed "
            f"{PARTICIPANT_ID_BYTES * 8}-bit integer"
        )
    return participant_id.to_bytes(PARTICIPANT_ID_BYTES, "big", signed=True)


# ── challenge ───────────────────────────────────────────────────────────
def challenge_digest(
    session_id: Union[str, bytes],
    participant_id: int,
    points: Iterable[Point],
    config: ProofConfig = DEFAULT_CONFIG,
) -> bytes:
    """Raw hash over the transcript, before reduction into Z_q."""
    h = config.new_hasher()
    h.update(encode_session_id(session_id))
    h.update(encode_participant_id(participant_id))
    for p in points:
        h.update(p.to_bytes_uncompressed())
    return h.digest()


def compute_challenge(
    session_id: Union[str, bytes],
    participant_id: int,
    points: Iterable[Point],
    config: ProofConfig = DEFAULT_CONFIG,
) -> Scalar:
    """
    Fiat-Shamir challenge  c ∈ Z_q \\ {0}.

    Parameters
    ----------
    session_id : str or bytes
        Protocol-run identifier; ``str`` is UTF-8 encoded.
    participant_id : int
        Prover's identifier, signed 32-bit.
    points : iterable of Point
        Transcript points, hashed in the given order.
    config : ProofConfig
        Hash selection; must match between prover and verifier.

    Raises
    ------
    ChallengeDerivationError
        If the digest reduces to zero modulo the group order.
    """
    c = Scalar.from_bytes_reduce(
        challenge_digest(session_id, participant_id, points, config)
    )
    if c.is_zero():
        logger.error(
            "challenge reduced to zero (hash=%s, participant=%d)",
            config.hash_name, participant_id,
        )
        raise ChallengeDerivationError("hash resulted in zero scalar")
    return c
