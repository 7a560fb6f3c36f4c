"""Application settings."""

import os
from pathlib import Path


def _csv(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


# Database
DB_PATH = os.getenv("CONTENT_DB_PATH", "content.duckdb")

# Logging
LOG_DIR = Path(os.getenv("CONTENT_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("CONTENT_LOG_LEVEL", "INFO")

# Site
SITE_BASE_URL = os.getenv("SITE_BASE_URL", "https://orbitsaas.cloud").rstrip("/")
SUPPORTED_LANGUAGES = _csv(os.getenv("SUPPORTED_LANGUAGES", "en,bn"))

# Summarizer (OpenAI-compatible chat completions)
SUMMARIZER_API_URL = os.getenv("SUMMARIZER_API_URL", "https://api.groq.com/openai/v1/chat/completions")
SUMMARIZER_API_KEY = os.getenv("GROQ_API_KEY")
SUMMARIZER_MODEL = os.getenv("SUMMARIZER_MODEL", "llama-3.1-8b-instant")
SUMMARIZER_TIMEOUT = float(os.getenv("SUMMARIZER_TIMEOUT", "15"))
GIST_TARGET_WORDS = 150

# Welcome mail
MAIL_API_URL = "https://api.resend.com/emails"
MAIL_API_KEY = os.getenv("RESEND_API_KEY")
MAIL_FROM = os.getenv("MAIL_FROM", "ORBIT SaaS <hello@orbitsaas.cloud>")
MAIL_TIMEOUT = 10

# Auth
JWT_SECRET = os.getenv("JWT_SECRET", "orbit-admin-secret-change-me")
JWT_ALGORITHM = "HS256"

# HTTP
CORS_ORIGINS = _csv(
    os.getenv(
        "CORS_ORIGINS",
        "https://orbitsaas.cloud,https://www.orbitsaas.cloud,"
        "http://localhost:5173,http://localhost:5174,http://localhost:3000",
    )
)
CONTEXT_CACHE_CONTROL = "public, s-maxage=60, stale-while-revalidate=30"
CONTENT_CACHE_CONTROL = "public, s-maxage=60, stale-while-revalidate=120"
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
