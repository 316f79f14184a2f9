import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables only for local development
if os.path.exists('.env'):
    load_dotenv()
    logger.info("Loading from .env file (local development)")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./strings.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]
