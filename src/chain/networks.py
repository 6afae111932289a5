from __future__ import annotations

from dataclasses import dataclass

from config import get_env


@dataclass(frozen=True)
class Network:
    name: str
    rpc_url: str
    ws_url: str | None
    chain_id: int


_PRESETS = {
    "ethereum": ("RPC_URL_ETHEREUM", "WS_URL_ETHEREUM", 1),
    "sepolia": ("RPC_URL_SEPOLIA", "WS_URL_SEPOLIA", 11155111),
}


def get_network(name: str) -> Network:
    """Resolve a network preset, reading its endpoints from the environment."""
    key = name.lower()
    if key not in _PRESETS:
        known = ", ".join(sorted(_PRESETS))
        raise ValueError(f"Unknown network {name!r} (expected one of: {known})")
    rpc_env, ws_env, chain_id = _PRESETS[key]
    return Network(
        name=key,
        rpc_url=str(get_env(rpc_env, required=True)),
        ws_url=get_env(ws_env),
        chain_id=chain_id,
    )
