"""
Configuration settings for the Wordly dictionary widget
"""
import os
from dotenv import load_dotenv
from loguru import logger


# Load environment variables (try multiple locations for local overrides)
def load_environment():
    """Load environment variables from .env files when present"""
    env_loaded = load_dotenv()
    if env_loaded:
        logger.info("Loaded environment variables from .env file")
    else:
        logger.debug("No .env file found, using system environment variables")

    for env_file in ['.env.local']:
        if os.path.exists(env_file):
            load_dotenv(env_file, override=True)
            logger.info(f"Loaded additional environment from {env_file}")

load_environment()

VALID_THEMES = ("system", "light", "dark")


class Config:
    """Configuration class for the widget"""

    # Dictionary service
    DICTIONARY_API_URL: str = os.getenv(
        "WORDLY_DICTIONARY_API_URL", "https://api.dictionaryapi.dev/api/v2/entries/en"
    ).rstrip("/")
    DICTIONARY_SOURCE_NAME: str = "Free Dictionary API"

    # Favorites persistence
    FAVORITES_FILE: str = os.getenv(
        "WORDLY_FAVORITES_FILE",
        os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "wordly_storage.json"),
    )
    FAVORITES_STORAGE_KEY: str = "wordly_favs"

    # Rendering
    SYNONYM_LIMIT: int = 8
    PHONETIC_SEPARATOR: str = " • "
    DEFAULT_THEME: str = os.getenv("WORDLY_THEME", "system").lower()

    # Server
    HOST: str = os.getenv("WORDLY_HOST", "0.0.0.0")
    PORT: int = int(os.getenv("WORDLY_PORT", "5001"))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "wordly.log")

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration values"""
        logger.info("Validating configuration...")

        errors = []
        if not cls.DICTIONARY_API_URL.startswith(("http://", "https://")):
            errors.append(f"WORDLY_DICTIONARY_API_URL must be an http(s) URL, got '{cls.DICTIONARY_API_URL}'")
        if cls.DEFAULT_THEME not in VALID_THEMES:
            errors.append(f"WORDLY_THEME must be one of {', '.join(VALID_THEMES)}, got '{cls.DEFAULT_THEME}'")

        if errors:
            for error in errors:
                logger.error(error)
            raise ValueError("; ".join(errors))

        logger.info(f"Dictionary endpoint: {cls.DICTIONARY_API_URL}")
        logger.info(f"Favorites file: {cls.FAVORITES_FILE}")
        return True

# Global config instance
config = Config()
