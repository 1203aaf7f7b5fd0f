"""Club Tracker: shared Flask extension instances.
==================================================
This module centralizes third-party Flask extensions so they can be imported
without causing circular dependencies. Import **only** from here in app code:
    from extensions import csrf, limiter

Do **not** import the application here. Extensions are initialized by
`create_app` via `ext.init_app(app)`.
"""
from __future__ import annotations

from flask_compress import Compress
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_wtf.csrf import CSRFProtect, generate_csrf

# Core extensions (initialized in app factory)
csrf: CSRFProtect = CSRFProtect()
compress: Compress = Compress()

# Storage and default limits come from RATELIMIT_* config keys
limiter: Limiter = Limiter(key_func=get_remote_address)

__all__ = ["csrf", "compress", "limiter", "generate_csrf"]
