#!/usr/bin/env python3
"""Example: verify a Bitcoin Core signed message from the command line."""

import sys

from picosign import verify_message

if len(sys.argv) != 4:
    print("usage: verify_message.py ADDRESS SIGNATURE MESSAGE")
    sys.exit(2)

address, signature, text = sys.argv[1:]
print("Verify:", verify_message(address, text, signature))
