import time
from web3 import Web3
from utils.logger import setup_logger


class GasMonitor:
    def __init__(self, margin: float = 1.15, cache_timeout: int = 30):
        self.logger = setup_logger("GasMonitor")
        self.margin = margin
        self.cache_timeout = cache_timeout  # секунды
        self.gas_price_cache = None

    def get_optimal_gas_price(self, web3) -> int:
        """Получение цены газа с маржой и кэшированием"""
        current_time = time.time()

        if (self.gas_price_cache and
                current_time - self.gas_price_cache['timestamp'] < self.cache_timeout):
            return self.gas_price_cache['gas_price']

        try:
            gas_price = web3.eth.gas_price
        except Exception as e:
            self.logger.warning(f"⚠️ Failed to fetch gas price: {e}")
            # Безопасное значение по умолчанию, не кэшируем
            return Web3.to_wei('10', 'gwei')

        optimal_price = int(gas_price * self.margin)
        self.gas_price_cache = {
            'gas_price': optimal_price,
            'timestamp': current_time
        }

        self.logger.debug(f"⛽ Gas price: {Web3.from_wei(optimal_price, 'gwei'):.4f} Gwei")
        return optimal_price
