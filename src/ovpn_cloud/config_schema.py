"""
JSON schemas for configuration validation.
"""

CLIENT_SCHEMA = {
    "type": "object",
    "properties": {
        "cloud_id": {"type": ["string", "null"]},
        "base_url": {"type": ["string", "null"]},
        "client_id": {"type": ["string", "null"]},
        "client_secret": {"type": ["string", "null"]},
        "timeout": {"type": "number", "exclusiveMinimum": 0},
        "token_refresh_margin": {"type": "number", "minimum": 0},
        "user_agent": {"type": "string"},
    },
    "additionalProperties": False,
}

LOGGING_SCHEMA = {
    "type": "object",
    "properties": {
        "level": {"type": "string", "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
        "format": {"type": "string", "enum": ["text", "json"]},
        "redact_secrets": {"type": "boolean"},
    },
    "additionalProperties": False,
}

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "client": CLIENT_SCHEMA,
        "logging": LOGGING_SCHEMA,
    },
    "additionalProperties": False,
}
