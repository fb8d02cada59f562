"""
Token registry

Resolves a token symbol (TRX, USDT) or a base58 contract address to a
Token for a given network. The built-in table can be extended or
overridden with a JSON file shaped like:

    {"mainnet": {"USDT": {"address": "TR7N...", "decimals": 6}}, "nile": {...}}
"""

import json
import logging
from typing import Dict, Optional, Tuple

from ..config import settings
from ..constants import NETWORKS, TRX_ADDRESS
from .types import Token

logger = logging.getLogger(__name__)

TokenTable = Dict[str, Dict[str, dict]]

# Tokens whose address is looked up but not listed fall back to 6 decimals
DEFAULT_DECIMALS = 6

COMMON_TOKENS: TokenTable = {
    "mainnet": {
        "TRX": {"address": TRX_ADDRESS, "decimals": 6},
        "WTRX": {"address": "TNUC9Qb1rRpS5CbWLmNMxXBjyFoydXjWFR", "decimals": 6},
        "USDT": {"address": "TR7NHqjeKQxGTCi8q8ZY4pL8otSzgjLj6t", "decimals": 6},
        "SUN": {"address": "TSSMHYeV2uE9qYH95DqyoCuNCzEL1NvU3S", "decimals": 18},
    },
    "nile": {
        "TRX": {"address": TRX_ADDRESS, "decimals": 6},
        "WTRX": {"address": "TYsbWxNnyTgsZaTFaue9hqpxkU3Fkco94a", "decimals": 6},
        "USDT": {"address": "TXYZopYRdj2D9XRtbG411XZZ3kM5VkAeBf", "decimals": 6},
    },
}


class UnknownTokenError(ValueError):
    """Unknown network or token symbol"""
    pass


def is_address(value: str) -> bool:
    """True for a base58 TRON address (T..., 34 chars)"""
    return value.startswith("T") and len(value) == 34


def load_token_registry(path: Optional[str] = None) -> TokenTable:
    """Built-in token table merged with an optional JSON override file"""
    registry = {network: dict(tokens) for network, tokens in COMMON_TOKENS.items()}

    path = path or settings.TOKENS_FILE
    if not path:
        return registry

    logger.debug("Loading token overrides from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        overrides = json.load(f)

    for network, tokens in overrides.items():
        registry.setdefault(network, {}).update(tokens)
    return registry


def get_token(
    symbol_or_address: str,
    network: str,
    registry: Optional[TokenTable] = None
) -> Token:
    """Resolve a symbol or address to a Token

    Addresses missing from the registry resolve to an UNKNOWN token with
    6 decimals; unknown symbols are an error.

    Raises:
        UnknownTokenError: unknown network or symbol
    """
    registry = registry if registry is not None else load_token_registry()
    network_tokens = registry.get(network)
    if network_tokens is None:
        raise UnknownTokenError(f"Unknown network: {network}. Valid: {', '.join(NETWORKS)}")

    if is_address(symbol_or_address):
        for symbol, data in network_tokens.items():
            if data["address"] == symbol_or_address:
                return Token.from_dict(symbol, data)
        return Token(symbol="UNKNOWN", address=symbol_or_address, decimals=DEFAULT_DECIMALS)

    symbol = symbol_or_address.upper()
    if symbol not in network_tokens:
        raise UnknownTokenError(f"Unknown token: {symbol} on {network}")
    return Token.from_dict(symbol, network_tokens[symbol])


def pair_address(token: Token, network: str, registry: Optional[TokenTable] = None) -> str:
    """Address used for pool lookups: TRX trades as WTRX inside pools"""
    if not token.is_trx:
        return token.address
    return get_token("WTRX", network, registry).address


def sort_tokens(
    token_a: Token,
    token_b: Token,
    network: str,
    registry: Optional[TokenTable] = None
) -> Tuple[Token, Token, bool]:
    """Order two tokens as (token0, token1) the way V3 pools do

    TRON base58 addresses share one length and the base58 alphabet is in
    ASCII order, so string order equals numeric address order.

    Returns:
        (token0, token1, swapped) where swapped means token_b became token0
    """
    address_a = pair_address(token_a, network, registry)
    address_b = pair_address(token_b, network, registry)
    if address_a == address_b:
        raise UnknownTokenError("Identical token addresses")
    if address_a < address_b:
        return token_a, token_b, False
    return token_b, token_a, True
