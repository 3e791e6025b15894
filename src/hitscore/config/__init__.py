"""Configuration: settings sources, config tables and structlog setup."""
