"""PingFederate-specific exceptions for error handling."""


class PingFederateError(Exception):
    """Base exception for all PingFederate connector operations."""
    pass


class ConfigurationError(PingFederateError):
    """Connector is missing a required setting (instance URL, credentials)."""
    pass


class PingFederateTransportError(PingFederateError):
    """Network-level failure talking to the PingFederate admin API.
    
    Attributes:
        endpoint: API endpoint that failed
    """
    
    def __init__(self, endpoint: str, cause: Exception):
        self.endpoint = endpoint
        self.cause = cause
        super().__init__(f"request to {endpoint} failed: {cause}")


class PingFederateAPIError(PingFederateError):
    """Non-200 response from the PingFederate admin API.
    
    Attributes:
        status_code: HTTP status code
        message: Raw response body
        endpoint: API endpoint that failed
    """
    
    def __init__(self, status_code: int, message: str, endpoint: str):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        super().__init__(
            f"request failed with status code {status_code}, response: {message} ({endpoint})"
        )


class PingFederateDecodeError(PingFederateError):
    """Response body could not be decoded as JSON."""
    
    def __init__(self, endpoint: str, body: str):
        self.endpoint = endpoint
        self.body = body
        super().__init__(f"malformed JSON from {endpoint}: {body[:200]}")


class InvalidPrincipalError(PingFederateError):
    """Grant target is not a user; only users can hold PingFederate roles."""
    pass
