import os
import logging
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables only for local development
if os.path.exists('.env'):
    load_dotenv()
    logger.info("Loading from .env file (local development)")

# ------------------------------------------------------------------------------
# STORAGE
# ------------------------------------------------------------------------------
DATA_FILE = os.getenv("DATA_FILE", "signal.json")
DATABASE_URL = os.getenv("DATABASE_URL")

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", 8000))

# ------------------------------------------------------------------------------
# PROFILE
# ------------------------------------------------------------------------------
CAT_FACTS_API = os.getenv("CAT_FACTS_API", "https://catfact.ninja/fact")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", 5.0))

USER_EMAIL = os.getenv("USER_EMAIL", "your.email@example.com")
USER_NAME = os.getenv("USER_NAME", "Your Full Name")
USER_STACK = os.getenv("USER_STACK", "Python/FastAPI")
