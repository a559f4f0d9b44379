# ✅ СЕТЬ ПО УМОЛЧАНИЮ
RISE_NETWORK = {
    "name": "Rise Testnet",
    "rpc_url": "https://testnet.riselabs.xyz",
    "chain_id": 11155931,
    "explorer": "https://explorer.testnet.riselabs.xyz",
    "native_token": "ETH"
}

# Gaspump router (Uniswap V2 интерфейс)
ROUTER_ADDRESS = "0x5eC9BEaCe4a0f46F77945D54511e2b454cb8F38E"

# ✅ ТОКЕНЫ В ПОРЯДКЕ ОБЪЯВЛЕНИЯ
DEFAULT_TOKENS = [
    {"symbol": "MOG", "address": "0x99dBE4AEa58E518C50a1c04aE9b48C9F6354612f", "decimals": 18},
    {"symbol": "WETH", "address": "0x4200000000000000000000000000000000000006", "decimals": 18},
    {"symbol": "RISE", "address": "0xd6e1afe5cA8D00A2EFC01B89997abE2De47fdfAf", "decimals": 18},
    {"symbol": "USDT", "address": "0x40918Ba7f132E0aCba2CE4de4c4baF9BD2D7D849", "decimals": 6},
]

DEFAULT_SWAP_SETTINGS = {
    "amount_min": "0.5",
    "amount_max": "2",
    "delay_min_ms": 15000,
    "delay_max_ms": 30000,
    "max_swaps": 50,
    "slippage_bps": 500,
    "gas_limit": 200000,
    "approve_gas_limit": 100000,
    "deadline_seconds": 300,
    "confirmations": 1,
    "receipt_timeout": 180
}

MAX_UINT256 = 2 ** 256 - 1
BPS_DENOMINATOR = 10000

# Округление случайной суммы перед конвертацией в base units
AMOUNT_PRECISION = 6


def explorer_address_url(explorer: str, address: str) -> str:
    """Ссылка на адрес в блок-эксплорере"""
    return f"{explorer.rstrip('/')}/address/{address}"


# ERC20 ABI (approve, allowance, balance, decimals, symbol)
ERC20_ABI = [
    {
        "constant": False,
        "inputs": [
            {"name": "_spender", "type": "address"},
            {"name": "_value", "type": "uint256"}
        ],
        "name": "approve",
        "outputs": [{"name": "success", "type": "bool"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [
            {"name": "_owner", "type": "address"},
            {"name": "_spender", "type": "address"}
        ],
        "name": "allowance",
        "outputs": [{"name": "", "type": "uint256"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [{"name": "_owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "balance", "type": "uint256"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "type": "function"
    },
    {
        "constant": True,
        "inputs": [],
        "name": "symbol",
        "outputs": [{"name": "", "type": "string"}],
        "type": "function"
    }
]

# Uniswap V2 Router ABI (getAmountsOut + swapExactTokensForTokens)
ROUTER_ABI = [
    {
        "inputs": [
            {"internalType": "uint256", "name": "amountIn", "type": "uint256"},
            {"internalType": "address[]", "name": "path", "type": "address[]"}
        ],
        "name": "getAmountsOut",
        "outputs": [
            {"internalType": "uint256[]", "name": "amounts", "type": "uint256[]"}
        ],
        "stateMutability": "view",
        "type": "function"
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "amountIn", "type": "uint256"},
            {"internalType": "uint256", "name": "amountOutMin", "type": "uint256"},
            {"internalType": "address[]", "name": "path", "type": "address[]"},
            {"internalType": "address", "name": "to", "type": "address"},
            {"internalType": "uint256", "name": "deadline", "type": "uint256"}
        ],
        "name": "swapExactTokensForTokens",
        "outputs": [
            {"internalType": "uint256[]", "name": "amounts", "type": "uint256[]"}
        ],
        "stateMutability": "nonpayable",
        "type": "function"
    }
]
