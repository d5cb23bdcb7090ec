"""
Non-interactive Schnorr proof of knowledge of a discrete logarithm.

Proves knowledge of  x  such that  Y = x·B  for a base point  B  without
revealing x.  Typical use is a DKG round in which every dealer proves it
knows the constant term behind its public commitment.

Protocol (Fiat-Shamir)::

    k ←$ Z_q
    R  = k·B
    c  = H(sid, pid, B, Y, R)
    s  = k + x·c

Verification::

    s·B  ==  R + c·Y

The challenge binds the session and participant identifiers, so a proof
is only valid in the context it was produced for.

References
----------
- Schnorr (1989). "Efficient Identification and Signatures for Smart
  Cards."  CRYPTO 1989.
- Fiat & Shamir (1986). "How to Prove Yourself: Practical Solutions to
  Identification and Signature Problems."  CRYPTO 1986.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Union

from .curve import Scalar, Point, G, COMPRESSED_BYTES, SCALAR_BYTES
from .config import DEFAULT_CONFIG, ProofConfig
from .errors import ProofFormatError
from .hash import compute_challenge

logger = logging.getLogger(__name__)

PROOF_BYTES = COMPRESSED_BYTES + SCALAR_BYTES


@dataclass(frozen=True)
class DLogProof:
    """
    Transcript  (R, s)  of a discrete-log proof.

    Meaningless on its own: it verifies only together with the session
    id, participant id, base point and public key it was made for.
    """

    commitment: Point
    response: Scalar

    @staticmethod
    def prove(
        session_id: Union[str, bytes],
        participant_id: int,
        private_key: Scalar,
        public_key: Point,
        base_point: Point = G,
        *,
        config: ProofConfig = DEFAULT_CONFIG,
    ) -> DLogProof:
        """
        Produce a proof for  (private_key, public_key = private_key·base_point).

        The relation between ``private_key`` and ``public_key`` is **not**
        checked; passing an inconsistent pair yields a proof that no
        verifier accepts.

        Parameters
        ----------
        session_id : str or bytes
            Identifier of the protocol run.
        participant_id : int
            Prover's identifier (signed 32-bit).
        private_key : Scalar
            The witness *x*.
        public_key : Point
            The statement *Y*.
        base_point : Point
            The base *B*; defaults to the curve generator.

        Raises
        ------
        ChallengeDerivationError
            If the challenge hashes to zero.
        """
        k = Scalar.random()
        R = k * base_point
        c = compute_challenge(
            session_id, participant_id, [base_point, public_key, R], config,
        )
        s = k + private_key * c
        logger.debug(
            "generated dlog proof (session=%r, participant=%d)",
            session_id, participant_id,
        )
        return DLogProof(commitment=R, response=s)

    def verify(
        self,
        session_id: Union[str, bytes],
        participant_id: int,
        public_key: Point,
        base_point: Point = G,
        *,
        config: ProofConfig = DEFAULT_CONFIG,
    ) -> bool:
        """
        Check  s·B  ==  R + c·Y.

        Returns ``False`` for any mismatch of context, key or response.
        ``ChallengeDerivationError`` is raised, not mapped to ``False``.
        """
        c = compute_challenge(
            session_id,
            participant_id,
            [base_point, public_key, self.commitment],
            config,
        )
        lhs = base_point * self.response
        rhs = self.commitment + (c * public_key)
        if lhs != rhs:
            logger.debug(
                "rejected dlog proof (session=%r, participant=%d)",
                session_id, participant_id,
            )
            return False
        return True

    # serialisation ----------------------------------------------------------
    def to_bytes(self) -> bytes:
        """Compressed R (33 B) ‖ s (32 B)."""
        return self.commitment.to_bytes_compressed() + self.response.to_bytes()

    @classmethod
    def _decode(cls, commitment: bytes, response: bytes) -> DLogProof:
        """
        Strict decoding shared by every wire form.

        Only the compressed SEC 1 encoding is accepted for R, so a proof
        has exactly one serialisation.  The identity is refused: k ≠ 0
        means an honest prover never commits to it.
        """
        if len(commitment) != COMPRESSED_BYTES:
            raise ProofFormatError(
                f"commitment must be {COMPRESSED_BYTES} bytes, "
                f"got {len(commitment)}"
            )
        try:
            R = Point.from_bytes(commitment)
            s = Scalar.from_bytes(response)
        except ValueError as exc:
            raise ProofFormatError(str(exc)) from exc
        if R.is_inf():
            raise ProofFormatError("commitment is the point at infinity")
        return cls(commitment=R, response=s)

    @classmethod
    def from_bytes(cls, data: bytes) -> DLogProof:
        if len(data) != PROOF_BYTES:
            raise ProofFormatError(
                f"need {PROOF_BYTES} bytes, got {len(data)}"
            )
        return cls._decode(data[:COMPRESSED_BYTES], data[COMPRESSED_BYTES:])

    def to_dict(self) -> Dict[str, str]:
        """``{"commitment": hex, "response": hex}`` for JSON transport."""
        return {
            "commitment": self.commitment.to_bytes_compressed().hex(),
            "response": self.response.to_bytes().hex(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> DLogProof:
        try:
            commitment = bytes.fromhex(data["commitment"])
            response = bytes.fromhex(data["response"])
        except KeyError as exc:
            raise ProofFormatError(f"missing field {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise ProofFormatError(str(exc)) from exc
        return cls._decode(commitment, response)


# ── functional interface ────────────────────────────────────────────────

def generate_proof(
    session_id: Union[str, bytes],
    participant_id: int,
    private_key: Scalar,
    public_key: Point,
    base_point: Point = G,
    *,
    config: ProofConfig = DEFAULT_CONFIG,
) -> DLogProof:
    """Alias for :meth:`DLogProof.prove`."""
    return DLogProof.prove(
        session_id, participant_id, private_key, public_key, base_point,
        config=config,
    )


def verify_proof(
    proof: DLogProof,
    session_id: Union[str, bytes],
    participant_id: int,
    public_key: Point,
    base_point: Point = G,
    *,
    config: ProofConfig = DEFAULT_CONFIG,
) -> bool:
    """Alias for :meth:`DLogProof.verify`."""
    return proof.verify(
        session_id, participant_id, public_key, base_point, config=config,
    )
