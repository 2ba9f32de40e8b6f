# app/config.py
from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, List, Dict

# Load local .env for development
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")


class Settings(BaseSettings):
    # ─── Google / GA4 service account ──────────────────────────────────────────
    # Render stores the private key with literal "\n" sequences; ga4.py unescapes it.
    GOOGLE_CLIENT_EMAIL: Optional[str] = Field(default=None)
    GOOGLE_PRIVATE_KEY: Optional[str] = Field(default=None)
    GA_PROPERTY_ID: Optional[str] = Field(default=None)

    # ─── Server ────────────────────────────────────────────────────────────────
    PORT: int = 3000
    ENVIRONMENT: str = "development"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    def credential_flags(self) -> Dict[str, bool]:
        """Presence of each required credential, keyed the way /api/health reports them."""
        return {
            "hasGoogleClientEmail": bool(self.GOOGLE_CLIENT_EMAIL),
            "hasGooglePrivateKey": bool(self.GOOGLE_PRIVATE_KEY),
            "hasGAPropertyId": bool(self.GA_PROPERTY_ID),
        }

    def missing_credentials(self) -> List[str]:
        return [
            name
            for name in REQUIRED_ENV_VARS
            if not getattr(self, name)
        ]


REQUIRED_ENV_VARS = ("GOOGLE_CLIENT_EMAIL", "GOOGLE_PRIVATE_KEY", "GA_PROPERTY_ID")

# single settings instance for the whole app, captured at process start
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency; tests override it with their own Settings."""
    return settings
