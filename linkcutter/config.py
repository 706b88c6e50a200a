"""Module-level settings for linkcutter (no environment lookups)."""

from __future__ import annotations

# ---- HTTP ----
DEFAULT_HTTP_TIMEOUT = 5  # сек, requests сам по себе ждёт бесконечно

# ---- 1pt ----
ONEPT_ENDPOINT = "https://csclub.uwaterloo.ca/~phthakka/1pt-express/addURL"
ONEPT_SHORT_PREFIX = "https://1pt.co/"

# ---- CleanUri ----
CLEANURI_ENDPOINT = "https://cleanuri.com/api/v1/shorten"
# то, что encodeURIComponent оставляет как есть (помимо букв/цифр и "-_.")
CLEANURI_SAFE_CHARS = "!~*'()"

# ---- is.gd ----
ISGD_ENDPOINT = "https://is.gd/create.php"
ISGD_FORMAT = "json"

# ---- Логирование ----
LOGGER_NAME = "linkcutter"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_MAX_BYTES = 500_000
LOG_BACKUPS = 3
