"""Application environment types.

Used by Settings to switch environment-specific behavior (log rendering,
the development-only config endpoint).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
