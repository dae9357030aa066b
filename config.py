"""
Configuration module for the Metrik Intake Chat application.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Application configuration class."""

    # API Keys
    ANTHROPIC_API_KEY: str = os.getenv("ANTHROPIC_API_KEY", "")

    # API Configuration
    ANTHROPIC_BASE_URL: str = os.getenv("ANTHROPIC_BASE_URL", "https://api.anthropic.com")

    # Model Settings
    LLM_MODEL: str = "claude-haiku-4-5"
    LLM_MAX_TOKENS: int = 300

    # Application Settings
    APP_TITLE: str = "Metrik Intake Chat"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Timeouts (in seconds)
    LLM_TIMEOUT: float = float(os.getenv("LLM_TIMEOUT", "30.0"))

    # Connection pool
    MAX_CONNECTIONS: int = 10

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and print warnings for missing API keys."""
        if not cls.ANTHROPIC_API_KEY:
            print("   WARNING: ANTHROPIC_API_KEY not found in .env file")
            print("   Chat requests will fail with 502 until the key is configured.")


Config.validate()
