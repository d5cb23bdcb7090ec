"""
Tests for the secp256k1 wrapper: encodings and the group law pieces the
proof relies on.
"""

import pytest

from dlogproof.curve import (
    ORDER,
    COMPRESSED_BYTES,
    UNCOMPRESSED_BYTES,
    G,
    Point,
    Scalar,
)

# SEC 2 generator coordinates
GX = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
GY = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8


def test_generator_uncompressed_encoding():
    raw = G.to_bytes_uncompressed()
    assert len(raw) == UNCOMPRESSED_BYTES
    assert raw[0] == 0x04
    assert int.from_bytes(raw[1:33], "big") == GX
    assert int.from_bytes(raw[33:], "big") == GY


def test_generator_compressed_encoding():
    raw = G.to_bytes_compressed()
    assert len(raw) == COMPRESSED_BYTES
    assert raw[0] == 0x02                       # GY is even
    assert Point.from_bytes(raw) == G


def test_point_from_either_encoding():
    P = Scalar.random() * G
    assert Point.from_bytes(P.to_bytes_compressed()) == P
    assert Point.from_bytes(P.to_bytes_uncompressed()) == P


def test_identity_encodings():
    O = Point.identity()
    assert O.to_bytes_uncompressed() == b"\x00" * UNCOMPRESSED_BYTES
    assert Point.from_bytes(b"\x00" * COMPRESSED_BYTES).is_inf()


@pytest.mark.parametrize("data", [b"", b"\x02" * 10, b"\x05" + b"\x01" * 32])
def test_point_from_bytes_rejects_garbage(data):
    with pytest.raises(ValueError):
        Point.from_bytes(data)


def test_scalar_mul_both_sides():
    k = Scalar.random()
    assert k * G == G * k == Point.from_scalar(k)


def test_group_law():
    a, b = Scalar.random(), Scalar.random()
    assert (a * G) + (b * G) == (a + b) * G
    assert (a * G) - (a * G) == Point.identity()
    assert Scalar.zero() * G == Point.identity()


def test_scalar_reduction():
    assert Scalar.from_int(ORDER) == Scalar.zero()
    assert Scalar.from_int(ORDER + 5) == Scalar(5)
    assert Scalar.from_bytes_reduce(b"\xff" * 32).value == (2**256 - 1) % ORDER
    with pytest.raises(ValueError):
        Scalar.from_int(-1)


def test_scalar_strict_decoding():
    with pytest.raises(ValueError):
        Scalar.from_bytes(ORDER.to_bytes(32, "big"))
    with pytest.raises(ValueError):
        Scalar.from_bytes(b"\x01" * 31)
    s = Scalar.random()
    assert Scalar.from_bytes(s.to_bytes()) == s


def test_random_scalar_nonzero():
    assert all(not Scalar.random().is_zero() for _ in range(32))
