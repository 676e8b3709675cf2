"""
config.py — Application Configuration
======================================
Defaults for the Flask app.  Every key can be overridden from the
environment with a KRUSKAL_ prefix, e.g.

    KRUSKAL_BASE_INTERVAL_SECONDS=0.5 python main.py

Flask parses the value as JSON when it can, so numbers stay numbers.
"""

import secrets


class DefaultConfig:
    SECRET_KEY            = secrets.token_hex(32)

    # autoplay
    BASE_INTERVAL_SECONDS = 2.0      # seconds per step at 1.0x
    DEFAULT_SPEED         = 1.0

    # canvas
    CANVAS_WIDTH          = 900
    CANVAS_HEIGHT         = 600

    # sessions
    MAX_SESSIONS          = 256      # least recently used evicted past this

    # logging
    LOG_LEVEL             = "INFO"

    # server
    HOST                  = "127.0.0.1"
    PORT                  = 5000
