from .chainlink import OracleError, PriceFeed, RoundData

__all__ = ["PriceFeed", "RoundData", "OracleError"]
