"""
IP-based rate limiting for public endpoints.
"""
import os
from slowapi import Limiter
from slowapi.util import get_remote_address

# Each extraction launches a browser: 10 requests per minute in dev, 20 in production
RATE_LIMIT_EXTRACT = os.getenv("RATE_LIMIT_EXTRACT", "10/minute" if os.getenv("JOBFETCH_ENV") == "dev" else "20/minute")

limiter = Limiter(key_func=get_remote_address)
