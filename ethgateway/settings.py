import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from services.config import DEFAULT_CLIENT_CLASS, default_allowed_hosts, parse_port, parse_timeout

# ================================
# 1) Load environment variables
# ================================
load_dotenv(find_dotenv(usecwd=True))

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-key-change-me")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

# ================================
# 2) Gateway configuration
# ================================
# Required for serving; checked by `manage.py serve` and on every request
ETH_RPC_URL = os.getenv("ETH_RPC_URL") or None
ETH_RPC_TIMEOUT = parse_timeout(os.getenv("ETH_RPC_TIMEOUT", "10"))

GATEWAY_HOST = os.getenv("GATEWAY_HOST", "127.0.0.1")
GATEWAY_PORT = parse_port(os.getenv("GATEWAY_PORT", "3000"))

if os.getenv("DJANGO_ALLOWED_HOSTS"):
    ALLOWED_HOSTS = [h.strip() for h in os.getenv("DJANGO_ALLOWED_HOSTS").split(",") if h.strip()]
else:
    ALLOWED_HOSTS = default_allowed_hosts(GATEWAY_HOST)

ETH_CLIENT_CLASS = os.getenv("ETH_CLIENT_CLASS", DEFAULT_CLIENT_CLASS)

# ================================
# 3) Django
# ================================
INSTALLED_APPS = [
    "api",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "ethgateway.urls"
WSGI_APPLICATION = "ethgateway.wsgi.application"

# No persistent state
DATABASES = {}

USE_TZ = True

# ================================
# 4) Logging
# ================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    },
    "loggers": {
        "api": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "services": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
