"""
Configuration module for Scholar Connect Backend.
Centralizes environment variables, logging setup, and constants.
"""
import os
import logging
from dotenv import load_dotenv

from marks_memo_verifier.agent import DEFAULT_MODEL, resolve_api_key, resolve_simulated_delay

# Load .env file for local development
load_dotenv()

# ============================================================================
# Environment Configuration
# ============================================================================

# Environment identifier (production, staging, development, etc.)
ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")

# Comma-separated list of allowed origins for the frontend
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

# ============================================================================
# Verification Service Configuration
# ============================================================================

# Gemini credential; API_KEY is accepted for older deployments.
# When neither is set the marks memo verifier runs in simulation mode.
GOOGLE_API_KEY = resolve_api_key()

VERIFICATION_MODEL = os.environ.get("VERIFICATION_MODEL", DEFAULT_MODEL)

SIMULATED_DELAY_SECONDS = resolve_simulated_delay()

# ============================================================================
# Logging Configuration
# ============================================================================

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# ============================================================================
# Application Constants
# ============================================================================

# Defaults applied to a freshly registered student
DEFAULT_STUDENT_CATEGORY = "General"
DEFAULT_STUDENT_AGE = 20
DEFAULT_PHOTO_URL = "https://picsum.photos/200/200"

MARKS_MEMO_DOCUMENT_TYPE = "Marks Memo"
