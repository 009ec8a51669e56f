"""Application environment types.

Used by Settings to determine environment-specific behavior.

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution with in-memory database
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
