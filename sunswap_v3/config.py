"""
Configuration settings for the SunSwap skills

Loads environment variables (and an optional .env file) into a single
settings object shared by the scripts.
"""
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # Network used for token lookups when --network is not given
    DEFAULT_NETWORK: str = os.getenv("SUNSWAP_NETWORK", "nile")

    # Sun open API
    SUN_PRICE_API: str = os.getenv("SUN_PRICE_API", "https://open.sun.io/apiv2/price")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", 10))
    MAX_RETRIES: int = int(os.getenv("MAX_RETRIES", 3))

    # Slippage tolerance (%) used for minimum amounts
    DEFAULT_SLIPPAGE: float = float(os.getenv("DEFAULT_SLIPPAGE", 5))

    # Optional JSON file overriding the built-in token registry
    TOKENS_FILE: Optional[str] = os.getenv("SUNSWAP_TOKENS_FILE") or None

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Create global settings instance
settings = Settings()
