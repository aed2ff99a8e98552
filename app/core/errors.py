class ProxyError(Exception):
    """Base error for a failed proxy request. Carries the HTTP status to report."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(ProxyError):
    """The inbound request is missing or carries unusable input."""

    status_code = 400


class MissingUrlError(InputValidationError):
    def __init__(self, message: str = "URL is required"):
        super().__init__(message)


class InvalidUrlError(InputValidationError):
    """url is present but is not an absolute http(s) URL."""

    # Reported as a server error, same as a failed fetch
    status_code = 500


class FetchError(ProxyError):
    """The outbound GET failed: network, DNS, timeout or non-2xx status."""

    status_code = 500
