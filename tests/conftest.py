import os
import tempfile

# Логи тестов не должны попадать в logs/ рабочей директории
os.environ.setdefault(
    "AUTOSWAP_LOG_FILE", os.path.join(tempfile.mkdtemp(prefix="autoswap-logs-"), "autoswap.log")
)
