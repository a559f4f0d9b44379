import os
import base64
import re
from cryptography.fernet import Fernet, InvalidToken
from eth_account import Account


class SecurityManager:
    def __init__(self, encryption_key: str = None):
        # Используем ключ из переменных окружения
        self.encryption_key = encryption_key or os.getenv('ENCRYPTION_KEY')
        if not self.encryption_key:
            raise ValueError("ENCRYPTION_KEY is not set")

        # Дополняем ключ до 32 байт если нужно
        if len(self.encryption_key) < 32:
            self.encryption_key = self.encryption_key.ljust(32, '0')
        elif len(self.encryption_key) > 32:
            self.encryption_key = self.encryption_key[:32]

        # Кодируем в base64 для Fernet
        key_b64 = base64.urlsafe_b64encode(self.encryption_key.encode())
        self.cipher_suite = Fernet(key_b64)

    def encrypt_private_key(self, private_key: str) -> str:
        """Шифрование приватного ключа"""
        private_key = normalize_private_key(private_key)
        encrypted = self.cipher_suite.encrypt(private_key[2:].encode())
        return base64.urlsafe_b64encode(encrypted).decode()

    def decrypt_private_key(self, encrypted_key: str) -> str:
        """Дешифрование приватного ключа"""
        try:
            encrypted_bytes = base64.urlsafe_b64decode(encrypted_key.encode())
            decrypted = self.cipher_suite.decrypt(encrypted_bytes)
        except (InvalidToken, ValueError) as e:
            raise ValueError(f"Decryption failed: invalid encryption key or payload ({e.__class__.__name__})")
        return normalize_private_key(decrypted.decode())


def normalize_private_key(private_key: str) -> str:
    """
    Нормализация приватного ключа: убираем пробелы, добавляем 0x
    """
    private_key = (private_key or "").strip()

    if private_key.startswith('0x'):
        private_key = private_key[2:]

    if not re.match(r'^[0-9a-fA-F]{64}$', private_key):
        raise ValueError("Private key must be 64 hexadecimal characters")

    return '0x' + private_key


def validate_private_key(private_key: str) -> bool:
    """Валидация приватного ключа"""
    try:
        account = Account.from_key(normalize_private_key(private_key))
        return bool(account.address)
    except Exception:
        return False


def encrypt_private_key(private_key: str, encryption_key: str = None) -> str:
    return SecurityManager(encryption_key).encrypt_private_key(private_key)


def decrypt_private_key(encrypted_key: str, encryption_key: str = None) -> str:
    return SecurityManager(encryption_key).decrypt_private_key(encrypted_key)
