from .balancer import BalancerPoolAdapter
from .base import PoolInfo, VenueAdapter
from .erc20 import Token
from .errors import VenueError
from .uniswap_v3 import UniswapV3PoolAdapter

__all__ = [
    "VenueAdapter",
    "PoolInfo",
    "Token",
    "UniswapV3PoolAdapter",
    "BalancerPoolAdapter",
    "VenueError",
]
