import logging
import os
import sys
from pathlib import Path

# Глобальный словарь для отслеживания инициализированных логгеров
_initialized_loggers = set()

LOG_FILE = "logs/autoswap.log"


def setup_logger(name: str = None) -> logging.Logger:
    """Настройка системы логирования без дублирования"""
    if name is None:
        name = __name__

    logger = logging.getLogger(name)

    # Если логгер уже инициализирован - возвращаем его
    if name in _initialized_loggers:
        return logger

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # ✅ ПРОВЕРЯЕМ, ЧТОБЫ НЕ ДОБАВЛЯТЬ ОБРАБОТЧИКИ ПОВТОРНО
    if not logger.handlers:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Консольный handler
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # Файловый handler
        log_file = Path(os.getenv("AUTOSWAP_LOG_FILE", LOG_FILE))
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Помечаем как инициализированный
    _initialized_loggers.add(name)

    return logger
