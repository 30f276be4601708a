"""Custom exception hierarchy for ro-track."""


class RoTrackError(Exception):
    """Base exception for all ro-track errors."""


class CustomerNotFoundError(RoTrackError):
    """Raised when a referenced customer does not exist."""


class ValidationError(RoTrackError):
    """Raised when customer data fails validation."""


class DuplicateSerialNumberError(ValidationError):
    """Raised when a serial number is already in use."""


class InvalidPaymentStatusError(ValidationError):
    """Raised when a payment status cannot be stored."""


class ConfigurationError(RoTrackError):
    """Raised when configuration is invalid or missing."""


class StorageError(RoTrackError):
    """Raised when a store operation fails."""


class WriteConflictError(StorageError):
    """Raised when a read-modify-write keeps conflicting with other writers."""


class SinkError(RoTrackError):
    """Raised when a sink operation fails."""
