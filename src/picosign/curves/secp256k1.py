"""
secp256k1 (Bitcoin curve): key derivation, SEC encoding, ECDSA sign/verify,
public key recovery.
"""

from __future__ import annotations

import secrets

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

CURVE_ORDER = _N

_SIGN_ATTEMPTS = 64


def _mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    if a < 0:
        a = (a % n + n) % n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise ValueError("no inverse")
    return t % n


def _point_add(px: int, py: int, qx: int, qy: int) -> tuple[int, int]:
    """Add two secp256k1 points in affine coords; (0,0) is identity. Returns (rx, ry)."""
    if (px, py) == (0, 0):
        return (qx, qy)
    if (qx, qy) == (0, 0):
        return (px, py)
    if px == qx:
        if py == qy and py != 0:
            lam = (3 * px * px) * _mod_inv(2 * py, _P) % _P
        else:
            return (0, 0)
    else:
        lam = (qy - py) * _mod_inv(qx - px, _P) % _P
    rx = (lam * lam - px - qx) % _P
    ry = (lam * (px - rx) - py) % _P
    return (rx, ry)


def _point_mul(d: int, x: int, y: int) -> tuple[int, int]:
    """Scalar multiplication d * (x, y) on secp256k1; returns (rx, ry)."""
    d = d % _N
    rx, ry = 0, 0
    while d:
        if d & 1:
            rx, ry = _point_add(rx, ry, x, y)
        x, y = _point_add(x, y, x, y)
        d >>= 1
    return (rx, ry)


def _is_on_curve(x: int, y: int) -> bool:
    return 0 <= x < _P and 0 <= y < _P and (y * y - x * x * x - 7) % _P == 0


def _lift_x(x: int, odd: bool) -> int:
    """y coordinate for x with the requested parity; ValueError if x is not on the curve."""
    rhs = (x * x * x + 7) % _P
    y = pow(rhs, (_P + 1) // 4, _P)
    if (y * y) % _P != rhs:
        raise ValueError("no square root")
    if (y & 1) != odd:
        y = _P - y
    return y


def _privkey_scalar(privkey: bytes) -> int:
    if len(privkey) != 32:
        raise ValueError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise ValueError("invalid privkey")
    return d


def encode_pubkey(x: int, y: int, compressed: bool = False) -> bytes:
    """
    SEC encoding of a point.

    Returns:
        33 bytes (0x02/0x03 || x) if compressed, else 65 bytes (0x04 || x || y).
    """
    if compressed:
        return bytes([0x03 if y & 1 else 0x02]) + x.to_bytes(32, "big")
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


def decode_pubkey(pubkey: bytes) -> tuple[int, int]:
    """
    Parse a compressed (33 bytes) or uncompressed (65 bytes) SEC public key.

    Returns:
        Affine point (x, y).

    Raises:
        ValueError: on a bad prefix, bad length or a point off the curve.
    """
    if len(pubkey) == 33 and pubkey[0] in (0x02, 0x03):
        x = int.from_bytes(pubkey[1:], "big")
        if x >= _P:
            raise ValueError("pubkey x out of range")
        return (x, _lift_x(x, pubkey[0] == 0x03))
    if len(pubkey) == 65 and pubkey[0] == 0x04:
        x = int.from_bytes(pubkey[1:33], "big")
        y = int.from_bytes(pubkey[33:], "big")
        if not _is_on_curve(x, y):
            raise ValueError("pubkey point not on curve")
        return (x, y)
    raise ValueError("pubkey must be 33 bytes (02/03) or 65 bytes (04)")


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the public key from a 32-byte private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: Return the 33-byte compressed form instead of 65 bytes.

    Returns:
        SEC-encoded public key.
    """
    x, y = _point_mul(_privkey_scalar(privkey), _Gx, _Gy)
    return encode_pubkey(x, y, compressed)


def _recover_point(msg_hash: bytes, r: int, s: int, recid: int) -> tuple[int, int]:
    """Recover Q from (r, s, recid). recid 0,1: x=r; recid 2,3: x=r+n; recid&1 selects y parity."""
    if not 0 <= recid <= 3:
        raise ValueError("recid must be in 0..3")
    if not (0 < r < _N and 0 < s < _N):
        raise ValueError("r, s out of range")
    if recid & 2:
        if r + _N >= _P:
            raise ValueError("recid 2/3 but r+n >= p")
        x = r + _N
    else:
        x = r
    y = _lift_x(x, bool(recid & 1))
    r_inv = _mod_inv(r, _N)
    z = int.from_bytes(msg_hash, "big") % _N
    u1 = (-z * r_inv) % _N
    u2 = (s * r_inv) % _N
    g_mul = _point_mul(u1, _Gx, _Gy)
    r_mul = _point_mul(u2, x, y)
    qx, qy = _point_add(g_mul[0], g_mul[1], r_mul[0], r_mul[1])
    if (qx, qy) == (0, 0):
        raise ValueError("recovered point at infinity")
    return (qx, qy)


def recover_pubkey(
    msg_hash: bytes, r: int, s: int, recid: int, compressed: bool = False
) -> bytes:
    """
    Recover the public key from an ECDSA signature (msg_hash, r, s, recid).

    Args:
        msg_hash: 32-byte message hash that was signed.
        r, s: Signature components (scalars).
        recid: Recovery id (0-3) indicating which public key.
        compressed: Encode the recovered key in compressed form.

    Returns:
        SEC-encoded public key.

    Raises:
        ValueError: if no public key can be recovered for these inputs.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    qx, qy = _recover_point(msg_hash, r, s, recid)
    return encode_pubkey(qx, qy, compressed)


def sign_recoverable(privkey: bytes, msg_hash: bytes) -> tuple[int, int, int]:
    """
    ECDSA sign with recovery id; random k from the OS CSPRNG, low-s normalized.

    Args:
        privkey: 32-byte private key.
        msg_hash: 32-byte message hash to sign.

    Returns:
        (r, s, recid) with recid in 0..3.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    d = _privkey_scalar(privkey)
    z = int.from_bytes(msg_hash, "big") % _N
    our_point = _point_mul(d, _Gx, _Gy)
    for _ in range(_SIGN_ATTEMPTS):
        k = 1 + secrets.randbelow(_N - 1)
        kx, _ky = _point_mul(k, _Gx, _Gy)
        r = kx % _N
        if r == 0:
            continue
        s = (_mod_inv(k, _N) * (z + r * d)) % _N
        if s == 0:
            continue
        if s > _N // 2:
            s = _N - s
        for recid in range(4):
            try:
                if _recover_point(msg_hash, r, s, recid) == our_point:
                    return (r, s, recid)
            except ValueError:
                continue
    raise ValueError("sign_recoverable: could not produce a recoverable signature")


def verify_signature(msg_hash: bytes, r: int, s: int, pubkey: bytes) -> bool:
    """
    Plain ECDSA verification of (r, s) over msg_hash.

    Args:
        msg_hash: 32-byte message hash.
        r, s: Signature components.
        pubkey: SEC-encoded public key (33 or 65 bytes).

    Returns:
        True iff the signature is valid for msg_hash and pubkey.
    """
    if len(msg_hash) != 32:
        raise ValueError("msg_hash must be 32 bytes")
    if not (0 < r < _N and 0 < s < _N):
        return False
    qx, qy = decode_pubkey(pubkey)
    z = int.from_bytes(msg_hash, "big") % _N
    w = _mod_inv(s, _N)
    u1 = (z * w) % _N
    u2 = (r * w) % _N
    g_mul = _point_mul(u1, _Gx, _Gy)
    q_mul = _point_mul(u2, qx, qy)
    x, y = _point_add(g_mul[0], g_mul[1], q_mul[0], q_mul[1])
    if (x, y) == (0, 0):
        return False
    return x % _N == r


__all__: tuple[str, ...] = (
    "CURVE_ORDER",
    "decode_pubkey",
    "encode_pubkey",
    "privkey_to_pubkey",
    "recover_pubkey",
    "sign_recoverable",
    "verify_signature",
)
