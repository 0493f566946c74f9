"""
pagegen/core/config.py
═══════════════════════════════════════════════════════════════════════════════
Everything is read from the environment once, at import time.

  AWS Bedrock     →  AWS_REGION, MODEL_ID, TEMPERATURE
                     credentials come from boto3's normal chain
                     (env vars, ~/.aws, instance role) - never set here
  HTTP server     →  HOST, PORT
  Regeneration    →  DEGRADED_AFTER_FAILURES, SHUTDOWN_GRACE_S
═══════════════════════════════════════════════════════════════════════════════
"""

import logging
import os

log = logging.getLogger("config")


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        log.warning(f"{name}={raw!r} is not an integer - using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        log.warning(f"{name}={raw!r} is not a number - using {default}")
        return default


# ── AWS Bedrock ───────────────────────────────────────────────────────────────
AWS_REGION  = os.environ.get("AWS_REGION", "us-east-1")
MODEL_ID    = os.environ.get("MODEL_ID", "anthropic.claude-3-5-sonnet-20240620-v1:0")
TEMPERATURE = _env_float("TEMPERATURE", 1.0)

# Generation is seconds-scale; the read timeout has to cover a full page.
BEDROCK_READ_TIMEOUT_S    = _env_float("BEDROCK_READ_TIMEOUT_S", 300.0)
BEDROCK_CONNECT_TIMEOUT_S = _env_float("BEDROCK_CONNECT_TIMEOUT_S", 15.0)

# ── HTTP server ───────────────────────────────────────────────────────────────
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3000)

LOG_LEVEL  = os.environ.get("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# ── Regeneration ──────────────────────────────────────────────────────────────
DEGRADED_AFTER_FAILURES = _env_int("DEGRADED_AFTER_FAILURES", 3)
SHUTDOWN_GRACE_S        = _env_float("SHUTDOWN_GRACE_S", 10.0)

# ── Sanitizer markers ─────────────────────────────────────────────────────────
DOC_START_MARKER = "<!DOCTYPE html>"
DOC_END_MARKER   = "</html>"
