"""
dlogproof: non-interactive proofs of knowledge of a discrete logarithm.

A Schnorr proof made non-interactive with the Fiat-Shamir transform over
secp256k1, bound to a session id and a participant id so that a proof
cannot be replayed in another protocol run or by another party.  Meant as
a building block for DKG and other threshold protocols.

Quick start
-----------
::

    from dlogproof import G, Scalar, generate_proof, verify_proof

    x = Scalar.random()
    Y = x * G

    proof = generate_proof("session_1", 1, x, Y, G)
    assert verify_proof(proof, "session_1", 1, Y, G)
    assert not verify_proof(proof, "session_2", 1, Y, G)
"""

import logging

__version__ = "0.1.0"

# ── core types ──────────────────────────────────────────────────────────
from .curve import Scalar, Point, G, ORDER

# ── configuration & errors ──────────────────────────────────────────────
from .config import ProofConfig, DEFAULT_CONFIG
from .errors import (
    DLogProofError,
    ChallengeDerivationError,
    ProofFormatError,
    ConfigurationError,
)

# ── proofs ──────────────────────────────────────────────────────────────
from .hash import compute_challenge
from .proofs import DLogProof, generate_proof, verify_proof

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # version
    "__version__",
    # core
    "Scalar", "Point", "G", "ORDER",
    # config & errors
    "ProofConfig", "DEFAULT_CONFIG",
    "DLogProofError", "ChallengeDerivationError", "ProofFormatError",
    "ConfigurationError",
    # proofs
    "compute_challenge", "DLogProof", "generate_proof", "verify_proof",
]
