from enum import Enum

DEMO_API_KEY = "DEMO_KEY"
"""Public, rate-limited key accepted by api.nasa.gov."""

DONKI_BASE_URL = "https://api.nasa.gov/DONKI"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumLogFormat(str, Enum):
    AUTO = "auto"
    CONSOLE = "console"
    JSON = "json"
