"""
Centralized configuration
"""
import os
import logging
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

# Setup debug logger for configuration
_config_logger = logging.getLogger('config')

# Check for DEBUG_MODE early (before .env is loaded, check environment)
_debug_mode = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
if _debug_mode:
    logging.basicConfig(level=logging.DEBUG, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("DEBUG_MODE enabled - verbose logging active")

# Get config directory (current working directory)
_config_dir = Path.cwd()
_env_file = _config_dir / '.env'

if not _env_file.exists():
    _config_logger.debug(f".env not found at {_env_file.absolute()}, using environment and defaults")

# Load .env file if it exists
_dotenv_result = load_dotenv(_env_file)
if _debug_mode:
    _config_logger.debug(f"load_dotenv() returned: {_dotenv_result}")

# Environment: 'development' and 'test' always use the mock provider
APP_ENV = os.getenv('APP_ENV', 'production').lower()
MOCK_ENVIRONMENTS = ('development', 'test')

# Relay configuration
TARGET_LANGUAGE = 'ja'
"""Fixed locale every relay ends in; not configurable per request."""

DEFAULT_LANGUAGE_CODE = 'en'
"""Code returned when selection runs against an empty catalog."""

LANGUAGES_FILE = os.getenv('LANGUAGES_FILE', 'languages.json')
MIN_CHAIN_ROUNDS = 1
MAX_CHAIN_ROUNDS = 10

# Remote translation backend (Google Cloud Translation v2)
GOOGLE_TRANSLATE_API_KEY = os.getenv('GOOGLE_TRANSLATE_API_KEY', '')
GOOGLE_TRANSLATE_ENDPOINT = os.getenv(
    'GOOGLE_TRANSLATE_ENDPOINT',
    'https://translation.googleapis.com/language/translate/v2'
)
REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '30'))

# Server
HOST = os.getenv('HOST', '127.0.0.1')
PORT = int(os.getenv('PORT', '8080'))

# Logging
DEBUG_MODE = os.getenv('DEBUG_MODE', 'false').lower() == 'true'
LOG_LEVEL_NAMES = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'FATAL')


def parse_log_level(value: str, default: str = 'INFO') -> str:
    """Normalize a configured level name, falling back to the default when unknown."""
    name = (value or '').strip().upper()
    if name == 'WARNING':
        name = 'WARN'
    if name not in LOG_LEVEL_NAMES:
        _config_logger.warning(f"Unknown LOG_LEVEL {value!r}, using {default}")
        return default
    return name


LOG_LEVEL = 'DEBUG' if DEBUG_MODE else parse_log_level(os.getenv('LOG_LEVEL', 'INFO'))

if DEBUG_MODE or _debug_mode:
    _config_logger.setLevel(logging.DEBUG)
    _config_logger.debug("=" * 60)
    _config_logger.debug("LOADED CONFIGURATION VALUES:")
    _config_logger.debug("=" * 60)
    _config_logger.debug(f"   APP_ENV: {APP_ENV}")
    _config_logger.debug(f"   LANGUAGES_FILE: {LANGUAGES_FILE}")
    _config_logger.debug(f"   GOOGLE_TRANSLATE_ENDPOINT: {GOOGLE_TRANSLATE_ENDPOINT}")
    _config_logger.debug(f"   GOOGLE_TRANSLATE_API_KEY: {'***' + GOOGLE_TRANSLATE_API_KEY[-4:] if GOOGLE_TRANSLATE_API_KEY else '(not set)'}")
    _config_logger.debug(f"   REQUEST_TIMEOUT: {REQUEST_TIMEOUT}")
    _config_logger.debug(f"   LOG_LEVEL: {LOG_LEVEL}")
    _config_logger.debug(f"   HOST: {HOST}")
    _config_logger.debug(f"   PORT: {PORT}")
    _config_logger.debug("=" * 60)


@dataclass(frozen=True)
class RelaySettings:
    """Explicit configuration bundle handed to the relay context builder."""
    provider_mode: str = 'remote'  # 'mock' or 'remote'
    languages_file: str = LANGUAGES_FILE
    api_key: str = GOOGLE_TRANSLATE_API_KEY
    api_endpoint: str = GOOGLE_TRANSLATE_ENDPOINT
    request_timeout: int = REQUEST_TIMEOUT
    log_level: str = LOG_LEVEL
    random_seed: Optional[int] = None

    @classmethod
    def from_env(cls) -> 'RelaySettings':
        """Build settings from the loaded environment."""
        mode = 'mock' if APP_ENV in MOCK_ENVIRONMENTS else 'remote'
        return cls(provider_mode=mode)
