"""Custom exceptions for the service search engine."""


class ServiceSearchError(Exception):
    """Base exception for service search operations."""
    pass


class ValidationError(ServiceSearchError):
    """Exception raised when a caller breaks the search contract."""
    pass


class SearchError(ServiceSearchError):
    """Exception raised when the ranking pipeline fails unexpectedly."""
    pass


class ConfigurationError(ServiceSearchError):
    """Exception raised for invalid search configuration."""
    pass
