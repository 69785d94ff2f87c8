from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    session_secret: str = os.getenv("SESSION_SECRET", "glowguide-secret-change-in-production")
    amazon_tag: str = os.getenv("AMAZON_AFFILIATE_TAG", "")
    flipkart_tag: str = os.getenv("FLIPKART_AFFILIATE_ID", "")
    adsense_client: str = os.getenv("ADSENSE_CLIENT", "")
    max_upload_bytes: int = 5 * 1024 * 1024


DEFAULT_APP_CONFIG = AppConfig()
