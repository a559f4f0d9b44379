import os
from eth_account import Account
from utils.security import decrypt_private_key, normalize_private_key, validate_private_key
from utils.input_utils import safe_getpass


class WalletSession:
    """Подписывающая сессия, привязанная к одному адресу"""

    def __init__(self, private_key: str, name: str = "main"):
        self.name = name

        if not validate_private_key(private_key):
            raise ValueError("Invalid private key")

        self._account = Account.from_key(normalize_private_key(private_key))
        self.address = self._account.address

    @property
    def account(self):
        return self._account

    def sign_transaction(self, transaction: dict):
        return self._account.sign_transaction(transaction)

    def __repr__(self):
        return f"WalletSession(name={self.name!r}, address={self.address})"


def resolve_private_key(prompt: str = "🔐 Введите приватный ключ (без 0x)") -> str:
    """
    Источник ключа по порядку: PRIVATE_KEY, ENCRYPTED_PRIVATE_KEY + ENCRYPTION_KEY,
    интерактивный ввод
    """
    plain_key = os.getenv('PRIVATE_KEY')
    if plain_key:
        return normalize_private_key(plain_key)

    encrypted_key = os.getenv('ENCRYPTED_PRIVATE_KEY')
    if encrypted_key:
        return decrypt_private_key(encrypted_key)

    return normalize_private_key(safe_getpass(prompt))
