"""
Exception hierarchy.

A rejected proof is **not** an error: ``verify_proof`` simply returns
``False``.  Exceptions are reserved for situations in which a proof could
not be produced or evaluated at all.
"""

from __future__ import annotations


class DLogProofError(Exception):
    """Base class for every error raised by this package."""


class ChallengeDerivationError(DLogProofError):
    """
    The Fiat-Shamir hash reduced to the zero scalar.

    With a zero challenge the response ``s = k`` no longer involves the
    secret, so any proof built or accepted with it is meaningless.  The
    event has negligible probability and indicates a broken hash
    assumption; it aborts both proving and verification and must never
    be read as "proof invalid".
    """


class ProofFormatError(DLogProofError, ValueError):
    """A serialised proof could not be decoded."""


class ConfigurationError(DLogProofError, ValueError):
    """Unusable proof parameters (e.g. a hash too short for the group)."""
