"""
config.py — runtime settings for weth.

Values come from the environment (a local .env file is loaded first).
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Location resolver endpoints
# ---------------------------------------------------------------------------
IP_ECHO_URL = os.getenv("WETH_IP_URL", "https://api64.ipify.org")
GEOLOCATION_URL = os.getenv("WETH_GEO_URL", "http://ip-api.com/json")
HTTP_TIMEOUT = float(os.getenv("WETH_HTTP_TIMEOUT", "10"))  # seconds
USER_AGENT = os.getenv("WETH_USER_AGENT", "weth-repl/1.0")

# ---------------------------------------------------------------------------
# REPL
# ---------------------------------------------------------------------------
MILITARY_TIME = os.getenv("WETH_MILITARY", "0") == "1"
DEBUG = os.getenv("WETH_DEBUG", "0") == "1"
PROMPT = "-> "
