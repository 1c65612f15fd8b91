"""Configuration management with environment variables."""

import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

# HTTP client configuration
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10.0"))  # seconds, per outbound call

# Headers for the MercadoLivre social page fetch (localized markup)
SOCIAL_ACCEPT = "text/html"
SOCIAL_ACCEPT_LANGUAGE = os.getenv("SOCIAL_ACCEPT_LANGUAGE", "pt-BR,pt;q=0.9")

# Request guard
MAX_REQUEST_SIZE = int(os.getenv("MAX_REQUEST_SIZE", "2000"))  # bytes

# API configuration
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
