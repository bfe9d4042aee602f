"""
ResumeRover - Centralized rate limiting configuration.

All rate limit decorators should import `limiter` from this module.
The limiter keys on client IP address (via X-Forwarded-For when behind a proxy).
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

# --- Rate limit constants ---

# Upload + analysis: parses documents, the most expensive call
RATE_LIMIT_ANALYZE = "10/minute"

# Stored analysis lookups
RATE_LIMIT_READ = "60/minute"
