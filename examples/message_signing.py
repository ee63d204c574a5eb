#!/usr/bin/env python3
"""Example: sign a message with a private key and verify it against the address."""

from picosign import Message, PrivateKey

privkey = PrivateKey.from_wif("KwDiBf89QgGbjEhKnhXJuH7LrciVrZi3qYjgd9M7rFU73sVHnoWn")
address = privkey.to_address()
print("Address:", address)

message = Message("Hello, Bitcoin")
print("Magic hash:", message.magic_hash().hex()[:32] + "...")

signature = message.sign(privkey)
print("Signature (base64):", signature[:44] + "...")

print("Verify:", message.verify(address, signature))

other = PrivateKey(bytes(31) + bytes([2])).to_address()
print("Verify against", other, ":", message.verify(other, signature))
print("Reason:", message.last_error)
