from typing import Optional

# Exceptions
class HTTPGetError(Exception):
    """Base exception for httpget failures."""
    exit_code = 1

    def __init__(self, message: str, exit_code: Optional[int] = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

class MalformedURL(HTTPGetError):
    """Raised when no host can be separated from the URL."""
    exit_code = 2

    def __init__(self, url: str):
        super().__init__(f"malformed URL {url!r}: empty host")
        self.url = url

class ReceiveFailure(HTTPGetError):
    """Raised when a read fails before the peer closed the connection."""
    exit_code = 3

    def __init__(self, message: str, bytes_relayed: int = 0):
        super().__init__(message)
        self.bytes_relayed = bytes_relayed

class ConnectFailure(HTTPGetError):
    """Raised when the host cannot be resolved or connected to."""
    exit_code = 4

    def __init__(self, host: str, port: str, reason: str):
        super().__init__(f"connect to {host}:{port} failed: {reason}")
        self.host = host
        self.port = port

class SendFailure(HTTPGetError):
    """Raised when the request could not be written to the connection."""
    exit_code = 5

class OutputFailure(HTTPGetError):
    """Raised when the response cannot be written to the output, e.g. a closed pipe."""
    exit_code = 6
