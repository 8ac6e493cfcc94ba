# etl/exceptions.py

class SourceError(Exception):
    """Base error for the API source flow. status_code is the HTTP status reported to the caller."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputError(SourceError):
    """Caller-side problem: missing URL or a remote body that is not an array."""
    status_code = 400


class UpstreamError(SourceError):
    """Remote fetch failed: network error, non-JSON body or a 4xx/5xx reply."""
    status_code = 500
