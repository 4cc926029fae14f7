"""
Service Layer Exceptions

Custom exceptions for the NavigationService, the CatalogService and related
orchestration logic.
"""


class SessionNotFoundError(Exception):
    """Raised when a navigation session id is unknown (or already ended)."""
    pass


class DeviceNotFoundError(Exception):
    """Raised when a device id is unknown."""
    pass


class DecisionTreeNotFoundError(Exception):
    """Raised when a device has no troubleshooting procedure."""
    pass
