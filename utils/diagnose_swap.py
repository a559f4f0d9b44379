# utils/diagnose_swap.py
import asyncio
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from config.constants import ERC20_ABI
from config.settings import Config
from core.chain_client import ChainClient
from core.errors import ChainError
from core.token_registry import TokenRegistry
from core.wallet_manager import WalletSession, resolve_private_key
from services.quote_service import QuoteService
from web3 import Web3


async def diagnose_swap_issues(config: Config = None, wallet=None) -> bool:
    """Read-only диагностика: роутер, балансы, allowance, котировка"""
    print("🔧 DIAGNOSING SWAP ISSUES...")

    config = config or Config()
    wallet = wallet or WalletSession(resolve_private_key())
    registry = TokenRegistry.from_config(config.tokens)
    print(f"🔍 Using wallet: {wallet.address}")

    client = ChainClient(config.network['rpc_url'], wallet, chain_id=config.network.get('chain_id'))
    try:
        client.connect()
    except ChainError as e:
        print(f"❌ Failed to connect: {e}")
        return False

    healthy = True

    # 1. Router контракт
    print("\n🔗 ROUTER CONTRACT:")
    router = Web3.to_checksum_address(config.router_address)
    try:
        code = client.web3.eth.get_code(router)
    except Exception as e:
        print(f"   ❌ Router contract error: {e}")
        code = b""
    if code:
        print(f"   ✅ Contract exists: {len(code)} bytes")
    else:
        print(f"   ❌ No contract code at {config.router_address}")
        healthy = False

    # 2. Балансы и allowance
    print("\n💰 TOKEN BALANCES / 🔓 ALLOWANCE:")
    for token in registry:
        contract = client.contract(token.address, ERC20_ABI)
        try:
            balance = await client.call(contract, "balanceOf", wallet.address)
            allowance = await client.call(contract, "allowance", wallet.address, router)
            print(f"   {token.symbol}: {token.format_amount(balance)} | allowance: {allowance}")
        except ChainError as e:
            print(f"   ❌ {token.symbol}: {e}")
            healthy = False

    # 3. Котировка для первой пары каталога
    print("\n📊 QUOTE TEST:")
    tokens = registry.list_tokens()
    if len(tokens) >= 2:
        token_in, token_out = tokens[0], tokens[1]
        quote_service = QuoteService(client, config.router_address, config.get_swap_settings().slippage_bps)
        amount_in = token_in.to_base_units("1")
        path = [Web3.to_checksum_address(token_in.address), Web3.to_checksum_address(token_out.address)]
        try:
            expected = await quote_service.get_expected_out(amount_in, path)
            print(f"   1 {token_in.symbol} -> {token_out.format_amount(expected)} {token_out.symbol}")
        except ChainError as e:
            print(f"   ❌ Quote failed: {e}")
            healthy = False

    return healthy


if __name__ == "__main__":
    sys.exit(0 if asyncio.run(diagnose_swap_issues()) else 1)
