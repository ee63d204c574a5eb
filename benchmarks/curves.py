"""
Benchmark secp256k1 operations (pure Python).

Run from repo root:

  PYTHONPATH=src python benchmarks/curves.py
"""

from __future__ import annotations

import os
import sys
import time

_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_SRC = os.path.join(_REPO_ROOT, "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

import picosign.curves.secp256k1 as secp
from picosign.hashes import sha256d

SECP_PRIV = bytes(31) + bytes([1])
MSG_HASH = sha256d(b"message to sign")


def _time_it(fn, *args, n: int = 20, **kwargs) -> float:
    # Warmup
    for _ in range(2):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def main() -> None:
    n = 20
    print("Benchmark: secp256k1 (pure Python)")
    print(f"  Iterations: {n}")
    print()

    pub = secp.privkey_to_pubkey(SECP_PRIV, compressed=True)
    r, s, recid = secp.sign_recoverable(SECP_PRIV, MSG_HASH)

    rows = [
        ("privkey_to_pubkey", secp.privkey_to_pubkey, (SECP_PRIV,)),
        ("decode_pubkey", secp.decode_pubkey, (pub,)),
        ("sign_recoverable", secp.sign_recoverable, (SECP_PRIV, MSG_HASH)),
        ("recover_pubkey", secp.recover_pubkey, (MSG_HASH, r, s, recid)),
        ("verify_signature", secp.verify_signature, (MSG_HASH, r, s, pub)),
    ]
    for name, fn, args in rows:
        t = _time_it(fn, *args, n=n)
        print(f"  {name:<20} {t * 1e3:.2f} ms")


if __name__ == "__main__":
    main()
