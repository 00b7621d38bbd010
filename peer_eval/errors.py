"""Error taxonomy shared by services, routers and clients"""


class PeerEvalError(Exception):
    """Base class for expected failures"""


class AuthenticationFailure(PeerEvalError):
    """Bad credentials or unknown peer identifier"""


class ValidationFailure(PeerEvalError, ValueError):
    """Malformed upload or evaluation payload"""


class NotFound(PeerEvalError):
    pass


class ApiError(PeerEvalError):
    """Non-2xx response seen by an HTTP client"""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
