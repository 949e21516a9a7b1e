from slowapi import Limiter
from slowapi.util import get_remote_address

from rodo_audit.config import settings


def current_rate_limit() -> str:
    return settings.rate_limit


limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
