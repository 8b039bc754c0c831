"""Validator Constants

Centralized constants for the validator service.
"""

# Name reported by the liveness check
SERVICE_NAME = "validator"

# Service version reported by the API
SERVICE_VERSION = "0.1.0"

# Largest text accepted per request, in characters (0 disables the limit)
DEFAULT_MAX_INPUT_CHARS = 5_000_000

# Default bind port for the HTTP server
DEFAULT_API_PORT = 8082
