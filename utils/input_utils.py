import os
import sys
from getpass import getpass


def safe_getpass(prompt: str) -> str:
    """
    Безопасный ввод приватного ключа с обработкой для PyCharm
    """
    # Проверяем, запущено ли в PyCharm или есть проблемы с getpass
    is_pycharm = 'PYCHARM_HOSTED' in os.environ

    if is_pycharm or not sys.stdin.isatty():
        print(f"🚨 ВНИМАНИЕ: {prompt} (данные будут видны при вводе!)")
        result = input(f"{prompt}: ").strip()

        # Пытаемся очистить ввод из истории консоли
        clear_console_line()

        return result

    return getpass(prompt).strip()


def clear_console_line():
    """Очистка предыдущей строки в консоли (ANSI)"""
    if sys.stdout.isatty():
        print("\033[F\033[K", end="")


def secure_input(prompt: str, is_sensitive: bool = False) -> str:
    """
    Универсальная функция для безопасного ввода
    """
    if is_sensitive:
        return safe_getpass(prompt)
    return input(prompt).strip()
