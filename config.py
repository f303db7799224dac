"""
Runtime configuration, read from the environment (and a local .env file).
"""
import os
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent
load_dotenv(ROOT_DIR / ".env")

# Question generation
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
QUESTION_MODEL = os.getenv("QUESTION_MODEL", "claude-sonnet-4-20250514")
QUESTION_TEMPERATURE = float(os.getenv("QUESTION_TEMPERATURE", "0.4"))
QUESTION_COUNT = int(os.getenv("QUESTION_COUNT", "5"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# API
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000",
    ).split(",")
    if origin.strip()
]
