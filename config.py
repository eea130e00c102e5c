"""
Configuration management for the generative text proxy.

Loads environment variables from .env file and provides typed access to configuration.
Provider API keys are deliberately not cached here: use Config.get() so a key
set after startup is picked up on the next request.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
env_path = Path(__file__).parent / ".env"
load_dotenv(env_path)


class Config:
    """Configuration class for the proxy service."""

    # Server
    PORT = int(os.getenv("PORT", "8000"))
    ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Outbound provider calls
    UPSTREAM_TIMEOUT_S = float(os.getenv("UPSTREAM_TIMEOUT_S", "120"))

    # Secrets read per request through Config.get()
    PROVIDER_KEYS = {
        "gemini": "GEMINI_API_KEY",
        "groq": "GROQ_API_KEY",
    }

    @staticmethod
    def get(name: str) -> Optional[str]:
        """Look up a setting from the process environment at call time."""
        return os.environ.get(name)

    @classmethod
    def provider_status(cls) -> Dict[str, bool]:
        """Which provider keys are currently configured."""
        return {
            provider: bool(cls.get(env_var))
            for provider, env_var in cls.PROVIDER_KEYS.items()
        }

    @classmethod
    def validate(cls) -> bool:
        """Validate that at least one provider key is set."""
        status = cls.provider_status()
        missing = [cls.PROVIDER_KEYS[p] for p, ok in status.items() if not ok]

        if len(missing) == len(status):
            print(f"⚠️  Missing required environment variables: {', '.join(missing)}")
            print(f"   Please set them in .env file")
            return False

        return True


if __name__ == "__main__":
    # Test configuration loading
    print("Configuration loaded:")
    for provider, env_var in Config.PROVIDER_KEYS.items():
        print(f"  {env_var}: {'✓ Set' if Config.get(env_var) else '✗ Missing'}")
    print(f"  Port: {Config.PORT}")
    print(f"  Upstream timeout: {Config.UPSTREAM_TIMEOUT_S}s")
    print(f"  Environment: {Config.ENVIRONMENT}")
    print(f"\n  Validation: {'✓ PASSED' if Config.validate() else '✗ FAILED'}")
