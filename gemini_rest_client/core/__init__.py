"""Configuration, logging, HTTP client and exception types."""
