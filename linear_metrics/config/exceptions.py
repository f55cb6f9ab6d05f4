"""Configuration exceptions for Linear Metrics."""


class ConfigError(Exception):
    """
    Exception raised for errors in the configuration.
    """
