import importlib
import os
from pathlib import Path

_ENV_LOADED = False

# Well-known Ethereum mainnet addresses, overridable from the environment.
DEFAULT_UNISWAP_POOL = "0x88e6a0c2ddd26feeb64f039a2c41296fcb3f5640"  # WETH/USDC 0.05%
DEFAULT_BALANCER_POOL = "0xf08d4dea369c456d26a3168ff0024b904f2d8b91"  # BCoW 50WETH/50USDC
DEFAULT_ETH_USD_FEED = "0x5f4ec3df9cbd43714fe2740f5e3616155c5b8419"

DEFAULT_TOKENS = {
    "USDT": "0xdac17f958d2ee523a2206206994597c13d831ec7",
    "USDC": "0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48",
    "DAI": "0x6b175474e89094c44da98b954eedeac495271d0f",
    "WBTC": "0x2260fac5e5542a773aa44fbcfedf7c193bc2c599",
    "LINK": "0x514910771af9ca656af840dff83e8264ecf986ca",
}


def _load_env() -> None:
    global _ENV_LOADED
    if _ENV_LOADED:
        return
    try:
        dotenv = importlib.import_module("dotenv")
    except Exception as exc:  # pragma: no cover - defensive
        raise SystemExit("python-dotenv is required (pip install -e .)") from exc
    env_path = Path(__file__).resolve().parents[1] / ".env"
    dotenv.load_dotenv(dotenv_path=env_path)
    _ENV_LOADED = True


def get_env(
    name: str, default: str | None = None, required: bool = False
) -> str | None:
    _load_env()
    value = os.environ.get(name, default)
    if required and (value is None or value == ""):
        raise SystemExit(f"{name} env var is required")
    return value


def token_map() -> dict[str, str]:
    """Symbol -> ERC-20 address, each entry overridable as TOKEN_<SYMBOL>."""
    tokens = {}
    for symbol, default in DEFAULT_TOKENS.items():
        tokens[symbol] = get_env(f"TOKEN_{symbol}", default) or default
    return tokens


def uniswap_pool_address() -> str:
    return get_env("UNISWAP_POOL_ADDRESS", DEFAULT_UNISWAP_POOL) or DEFAULT_UNISWAP_POOL


def balancer_pool_address() -> str:
    return (
        get_env("BALANCER_POOL_ADDRESS", DEFAULT_BALANCER_POOL) or DEFAULT_BALANCER_POOL
    )


def price_feed_address() -> str:
    return get_env("ETH_USD_PRICE_FEED", DEFAULT_ETH_USD_FEED) or DEFAULT_ETH_USD_FEED
