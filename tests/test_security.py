import pytest

from core.wallet_manager import WalletSession, resolve_private_key
from utils.security import (
    decrypt_private_key,
    encrypt_private_key,
    normalize_private_key,
    validate_private_key
)

TEST_KEY = "0x" + "a" * 64


def test_normalize_adds_prefix_and_strips():
    assert normalize_private_key("  " + "a" * 64 + "\n") == TEST_KEY

    with pytest.raises(ValueError):
        normalize_private_key("0x1234")


def test_validate_private_key():
    assert validate_private_key(TEST_KEY)
    assert not validate_private_key("not a key")
    assert not validate_private_key("0x" + "0" * 64)


def test_encrypted_key_decrypts_with_same_encryption_key():
    encrypted = encrypt_private_key("a" * 64, encryption_key="unit-test-key")

    assert encrypted != TEST_KEY
    assert decrypt_private_key(encrypted, encryption_key="unit-test-key") == TEST_KEY
    with pytest.raises(ValueError):
        decrypt_private_key(encrypted, encryption_key="another-key")


def test_wallet_session_exposes_address():
    wallet = WalletSession("a" * 64)

    assert wallet.address.startswith("0x") and len(wallet.address) == 42
    with pytest.raises(ValueError):
        WalletSession("0x1234")


def test_resolve_private_key_prefers_env(monkeypatch):
    monkeypatch.setenv("PRIVATE_KEY", "a" * 64)
    monkeypatch.delenv("ENCRYPTED_PRIVATE_KEY", raising=False)

    assert resolve_private_key() == TEST_KEY


def test_resolve_private_key_from_encrypted_env(monkeypatch):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)
    monkeypatch.setenv("ENCRYPTION_KEY", "env-encryption-key")
    monkeypatch.setenv("ENCRYPTED_PRIVATE_KEY", encrypt_private_key(TEST_KEY, "env-encryption-key"))

    assert resolve_private_key() == TEST_KEY


def test_resolve_private_key_prompts_last(monkeypatch):
    monkeypatch.delenv("PRIVATE_KEY", raising=False)
    monkeypatch.delenv("ENCRYPTED_PRIVATE_KEY", raising=False)
    monkeypatch.setattr("core.wallet_manager.safe_getpass", lambda _prompt: "a" * 64)

    assert resolve_private_key() == TEST_KEY
