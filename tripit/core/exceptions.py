"""Shared exceptions module."""

from typing import Optional


class TripItException(Exception):
    """Base exception for the TripIt client."""

    pass


class CredentialConfigurationError(TripItException):
    """Exception raised when a credential is constructed with missing fields."""

    def __init__(self, field_name: str, message: str = "Credential field must not be empty"):
        """Create a new CredentialConfigurationError instance.

        Args:
        ----
            field_name (str): The name of the missing credential field.
            message (str, optional): The error message. Has default message.

        """
        self.field_name = field_name
        self.message = message
        super().__init__(f"{message}: {field_name}")


class TripItAPIError(TripItException):
    """Exception raised when the TripIt API answers with a non-200 status."""

    def __init__(self, status_code: int, message: Optional[str] = "TripIt API request failed"):
        """Create a new TripItAPIError instance.

        Args:
        ----
            status_code (int): The HTTP status code returned by TripIt.
            message (str, optional): The response body or reason phrase.

        """
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class InvalidResponseError(TripItException):
    """Exception raised when a TripIt response body cannot be decoded."""

    def __init__(self, message: Optional[str] = "Invalid response from TripIt"):
        """Create a new InvalidResponseError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)
