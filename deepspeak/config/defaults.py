"""deepspeak.config.defaults
=========================

Central place for the small, stable default values of the DeepSeek client.
Everything here can be overridden by the config file, environment variables or
constructor arguments (see :mod:`deepspeak.config`).

This module imports nothing from the rest of the package so it can be used
from any layer without circular imports. Only plain constants live here.
"""

from __future__ import annotations

# ---- Endpoint ----
DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com"
# Paths are relative to the base URL.
CHAT_COMPLETIONS_PATH = "/chat/completions"
MODELS_PATH = "/models"
# Payload of the final event on a streamed completion.
STREAM_DONE_SIGN = "[DONE]"
STREAM_DATA_PREFIX = "data:"

# ---- Model / transport ----
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"
DEEPSEEK_DEFAULT_TIMEOUT_SECONDS = 60.0

# ---- Wire request defaults ----
DEFAULT_FREQUENCY_PENALTY = 0.0
DEFAULT_PRESENCE_PENALTY = 0.0
DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 1.0
DEFAULT_TOP_P = 1.0


__all__ = [
    "DEEPSEEK_DEFAULT_BASE_URL",
    "CHAT_COMPLETIONS_PATH",
    "MODELS_PATH",
    "STREAM_DONE_SIGN",
    "STREAM_DATA_PREFIX",
    "DEEPSEEK_DEFAULT_MODEL",
    "DEEPSEEK_DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_FREQUENCY_PENALTY",
    "DEFAULT_PRESENCE_PENALTY",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TOP_P",
]
