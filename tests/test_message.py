"""Tests for Bitcoin signed messages: magic hash, sign, verify, serialization."""

from __future__ import annotations

import base64
import dataclasses
import logging

import pytest

from picosign import (TESTNET, Address, InvalidAddress, InvalidArgument,
                      InvalidSignatureEncoding, Message, PrivateKey, Signature,
                      VerificationResult, sha256d, sign_message,
                      signed_message_hash, verify_message)
from picosign.signing import ERROR_ADDRESS_MISMATCH, ERROR_INVALID_SIGNATURE

KEY_ONE = PrivateKey(bytes(31) + bytes([1]))
KEY_TWO = PrivateKey(bytes(31) + bytes([2]))
ADDR_ONE = "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH"
ADDR_ONE_UNCOMPRESSED = "1EHNa6Q4Jz2uvNExL497mE43ikXhwF6kZm"

# Signatures produced by Bitcoin Core / Electrum.
CORE_WIF_UNCOMPRESSED = "5KMWWy2d3Mjc8LojNoj8Lcz9B1aWu8bRofUgGwQk959Dw5h2iyw"
CORE_SIG_UNCOMPRESSED = (
    "G/iew/NhHV9V9MdUEn/LFOftaTy1ivGPKPKyMlr8OSokNC755fAxpSThNRivwTNsyY9vPUDTRYBPc2cmGd5d4y4="
)
CORE_WIF_COMPRESSED = "KwELaABegYxcKApCb3kJR9ymecfZZskL9BzVUkQhsqFiUKftb4tu"
CORE_SIG_COMPRESSED = (
    "IHdKsFF1bUrapA8GMoQUbgI+Ad0ZXyX1c/yAZHmJn5hSNBi7J+TrI1615FG3g9JEOPGVvcfDWIFWrg2exLNtoVc="
)


@pytest.fixture(scope="module")
def hello_signature() -> str:
    return Message("hello world").sign(KEY_ONE)


def _flip(signature: str, index: int) -> str:
    data = bytearray(base64.b64decode(signature))
    data[index] ^= 0x01
    return base64.b64encode(bytes(data)).decode("ascii")


def test_magic_hash_framing() -> None:
    expected = sha256d(b"\x18Bitcoin Signed Message:\n\x0bhello world")
    assert Message("hello world").magic_hash() == expected
    assert signed_message_hash("hello world") == expected


def test_magic_hash_deterministic() -> None:
    assert Message("same input").magic_hash() == Message("same input").magic_hash()


def test_magic_hash_domain_separation() -> None:
    for text in ("", "a", "hello world"):
        assert signed_message_hash(text) != sha256d(text.encode("utf-8"))


def test_magic_hash_long_and_multibyte() -> None:
    text = "x" * 300
    expected = sha256d(b"\x18Bitcoin Signed Message:\n\xfd\x2c\x01" + b"x" * 300)
    assert signed_message_hash(text) == expected
    expected = sha256d(b"\x18Bitcoin Signed Message:\n\x02" + "é".encode("utf-8"))
    assert signed_message_hash("é") == expected


def test_sign_verify(hello_signature: str) -> None:
    message = Message("hello world")
    assert message.verify(ADDR_ONE, hello_signature) is True
    assert message.last_error is None
    assert message.verify(Address.from_string(ADDR_ONE), hello_signature) is True


def test_signature_shape(hello_signature: str) -> None:
    sig = Signature.from_base64(hello_signature)
    assert sig.compressed is True
    assert 31 <= base64.b64decode(hello_signature)[0] <= 34


def test_sign_verify_uncompressed_key() -> None:
    key = PrivateKey(KEY_ONE.secret, compressed=False)
    signature = Message("hello world").sign(key)
    message = Message("hello world")
    assert message.verify(ADDR_ONE_UNCOMPRESSED, signature) is True
    assert message.verify(ADDR_ONE, signature) is False
    assert message.last_error == ERROR_ADDRESS_MISMATCH


def test_sign_verify_empty_and_unicode() -> None:
    for text in ("", "héllo wörld ✓ 🌍"):
        signature = sign_message(KEY_ONE, text)
        assert verify_message(ADDR_ONE, text, signature) is True


def test_sign_verify_testnet() -> None:
    key = PrivateKey(KEY_ONE.secret, TESTNET)
    address = key.to_address()
    signature = Message("hello world").sign(key)
    assert Message("hello world").verify(str(address), signature) is True


def test_verify_wrong_address(hello_signature: str) -> None:
    message = Message("hello world")
    assert message.verify(KEY_TWO.to_address(), hello_signature) is False
    assert message.last_error == ERROR_ADDRESS_MISMATCH


def test_verify_wrong_message(hello_signature: str) -> None:
    message = Message("hello world!")
    assert message.verify(ADDR_ONE, hello_signature) is False
    assert message.last_error


@pytest.mark.parametrize("index", [1, 16, 32, 33, 48, 64])
def test_verify_tampered_signature(hello_signature: str, index: int) -> None:
    message = Message("hello world")
    assert message.verify(ADDR_ONE, _flip(hello_signature, index)) is False
    assert message.last_error in (ERROR_ADDRESS_MISMATCH, ERROR_INVALID_SIGNATURE)


def test_verify_tampered_recovery_id(hello_signature: str) -> None:
    sig = Signature.from_base64(hello_signature)
    tampered = dataclasses.replace(sig, recid=sig.recid ^ 1).to_base64()
    message = Message("hello world")
    assert message.verify(ADDR_ONE, tampered) is False
    assert message.last_error in (ERROR_ADDRESS_MISMATCH, ERROR_INVALID_SIGNATURE)


def test_verify_unrecoverable_signature_is_invalid() -> None:
    n = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
    signature = Signature(r=n, s=1, recid=0).to_base64()
    message = Message("hello world")
    assert message.verify(ADDR_ONE, signature) is False
    assert message.last_error == ERROR_INVALID_SIGNATURE


def test_verify_clears_last_error(hello_signature: str) -> None:
    message = Message("hello world")
    assert message.verify(KEY_TWO.to_address(), hello_signature) is False
    assert message.last_error == ERROR_ADDRESS_MISMATCH
    assert message.verify(ADDR_ONE, hello_signature) is True
    assert message.last_error is None


def test_sign_does_not_set_last_error() -> None:
    message = Message("hello world")
    message.sign(KEY_ONE)
    assert message.last_error is None


def test_verify_detailed(hello_signature: str) -> None:
    message = Message("hello world")
    result = message.verify_detailed(KEY_TWO.to_address(), hello_signature)
    assert result == VerificationResult(False, ERROR_ADDRESS_MISMATCH)
    assert not result
    assert message.last_error is None
    result = message.verify_detailed(ADDR_ONE, hello_signature)
    assert result and result.error is None


def test_verify_bitcoin_core_signatures() -> None:
    address = PrivateKey.from_wif(CORE_WIF_UNCOMPRESSED).to_address()
    assert Message("test message").verify(address, CORE_SIG_UNCOMPRESSED) is True
    address = PrivateKey.from_wif(CORE_WIF_COMPRESSED).to_address()
    assert Message("test").verify(address, CORE_SIG_COMPRESSED) is True
    assert Message("test message").verify(address, CORE_SIG_COMPRESSED) is False


def test_verify_logs_failure_reason(hello_signature: str, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="picosign")
    Message("hello world").verify(KEY_TWO.to_address(), hello_signature)
    assert "does not match" in caplog.text


@pytest.mark.parametrize("value", [None, 42, b"bytes", ["list"]])
def test_message_requires_string(value) -> None:
    with pytest.raises(InvalidArgument):
        Message(value)


def test_sign_requires_private_key() -> None:
    with pytest.raises(InvalidArgument):
        Message("hello world").sign(KEY_ONE.secret)
    with pytest.raises(InvalidArgument):
        Message("hello world").sign(KEY_ONE.to_wif())


def test_verify_argument_errors(hello_signature: str) -> None:
    message = Message("hello world")
    with pytest.raises(InvalidArgument):
        message.verify(None, hello_signature)
    with pytest.raises(InvalidArgument):
        message.verify(ADDR_ONE, "")
    with pytest.raises(InvalidArgument):
        message.verify(ADDR_ONE, None)
    with pytest.raises(InvalidAddress):
        message.verify("not-an-address", hello_signature)
    with pytest.raises(InvalidSignatureEncoding):
        message.verify(ADDR_ONE, "!!not base64!!")
    with pytest.raises(InvalidSignatureEncoding):
        message.verify(ADDR_ONE, base64.b64encode(b"\x1f" * 64).decode("ascii"))
    assert message.last_error is None


@pytest.mark.parametrize("text", ["", "hello world", "héllo wörld ✓ 🌍", 'quote " and \\'])
def test_json_roundtrip(text: str) -> None:
    message = Message(text)
    assert Message.from_json(message.to_json()).message == text
    assert str(Message.from_json(message.to_json())) == str(message)


def test_from_json_accepts_mapping_and_bytes() -> None:
    assert str(Message.from_json({"message": "hello world"})) == "hello world"
    assert str(Message.from_json(b'{"message": "hello world"}')) == "hello world"


@pytest.mark.parametrize(
    "data", ["not json", '{"other": "x"}', '{"message": 5}', "[1, 2]", 5]
)
def test_from_json_rejects(data) -> None:
    with pytest.raises(InvalidArgument):
        Message.from_json(data)


def test_object_and_string_forms() -> None:
    message = Message.from_string("hello world")
    assert message.to_object() == {"message": "hello world"}
    assert message.to_json() == '{"message": "hello world"}'
    assert str(message) == "hello world"
    assert repr(message) == "<Message: hello world>"
    assert message == Message("hello world")
