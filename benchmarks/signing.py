"""
Benchmark signed messages: magic hash, sign and verify.
Reports time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picosign import Message, PrivateKey, signed_message_hash

N_TIME = 50
N_MEM = 20
PRIV = PrivateKey(bytes(31) + bytes([1]))
ADDRESS = PRIV.to_address()
MSG = Message("bench message for signed messages")
LONG_TEXT = "x" * 10_000


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(3):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print("Benchmark: signed messages (pure Python secp256k1)")
    print()

    signature = MSG.sign(PRIV)
    assert MSG.verify(ADDRESS, signature)
    print("  Sanity check: signature verifies.")
    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    t = _time_per_call(signed_message_hash, MSG.message, n=N_TIME * 100) * 1000
    print(f"  signed_message_hash (short)  {t:.4f} ms")
    t = _time_per_call(signed_message_hash, LONG_TEXT, n=N_TIME * 100) * 1000
    print(f"  signed_message_hash (10 kB)  {t:.4f} ms")
    t = _time_per_call(MSG.sign, PRIV) * 1000
    print(f"  Message.sign                 {t:.4f} ms")
    t = _time_per_call(MSG.verify, ADDRESS, signature) * 1000
    print(f"  Message.verify               {t:.4f} ms")
    t = _time_per_call(MSG.verify, str(ADDRESS), signature) * 1000
    print(f"  Message.verify (str address) {t:.4f} ms")
    print()

    print("  --- Peak memory (KiB) ---")
    print(f"  Message.sign    {_peak_kb(MSG.sign, PRIV):.2f}")
    print(f"  Message.verify  {_peak_kb(MSG.verify, ADDRESS, signature):.2f}")


if __name__ == "__main__":
    main()
