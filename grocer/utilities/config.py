"""Configuration management for the Grocer shopping assistant."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Retail / checkout handoff
DEFAULT_CURRENCY: Final[str] = os.getenv('DEFAULT_CURRENCY', 'USD')
DEFAULT_HANDOFF_DOMAIN: Final[str] = os.getenv('DEFAULT_HANDOFF_DOMAIN', 'https://www.example.com')
DEEP_LINK_SCHEME: Final[str] = os.getenv('DEEP_LINK_SCHEME', 'retailer')
MAX_ALTERNATIVES: Final[int] = int(os.getenv('MAX_ALTERNATIVES', '3'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('GROCER_DATA_DIR', str(BASE_DIR / 'data'))).resolve()
