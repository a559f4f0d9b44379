import random
from decimal import Decimal

import pytest

from config.constants import DEFAULT_TOKENS
from core.errors import ConfigError, UnitConversionError
from core.token_registry import TokenDescriptor, TokenRegistry


def test_registry_keeps_declaration_order():
    registry = TokenRegistry.from_config(DEFAULT_TOKENS)

    assert [token.symbol for token in registry.list_tokens()] == ["MOG", "WETH", "RISE", "USDT"]
    assert registry.get("USDT").decimals == 6
    assert registry.get("DOGE") is None
    assert len(registry) == 4


def test_registry_rejects_malformed_entry():
    with pytest.raises(ConfigError):
        TokenRegistry.from_config([{"symbol": "MOG", "decimals": 18}])


@pytest.mark.parametrize("decimals", [6, 8, 18])
def test_base_unit_conversion_recovers_amount(decimals):
    """x → base units → x в пределах 10^-d"""
    token = TokenDescriptor("0x" + "1" * 40, "TKN", decimals)
    rng = random.Random(7)

    for _ in range(200):
        amount = f"{rng.uniform(0.5, 2.0):.6f}"
        base = token.to_base_units(amount)
        assert abs(token.from_base_units(base) - Decimal(amount)) <= Decimal(10) ** -decimals


def test_usdt_conversion_is_exact():
    token = TokenDescriptor("0x" + "1" * 40, "USDT", 6)

    assert token.to_base_units("1.234567") == 1_234_567
    assert token.to_base_units("2") == 2_000_000
    assert token.format_amount(1_500_000) == "1.500000"


def test_conversion_rejects_excess_precision():
    token = TokenDescriptor("0x" + "1" * 40, "TWO", 2)

    with pytest.raises(UnitConversionError):
        token.to_base_units("1.234567")


@pytest.mark.parametrize("amount", ["abc", "-1", "NaN"])
def test_conversion_rejects_invalid_amounts(amount):
    token = TokenDescriptor("0x" + "1" * 40, "TKN", 18)

    with pytest.raises(UnitConversionError):
        token.to_base_units(amount)
