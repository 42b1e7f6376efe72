"""
Domain Errors

Every failure the services raise on purpose is a TournamentError subclass.
The HTTP layer maps the subclass to a status code (see app.main); anything
else becomes a 500.
"""


class TournamentError(Exception):
    """Base class for errors raised by the tournament services"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TournamentError):
    """The referenced entity does not exist"""

    status_code = 404


class InvalidParameterError(TournamentError):
    """The input is malformed or inconsistent"""

    status_code = 400


class UnauthorizedError(TournamentError):
    """Credentials are missing or wrong"""

    status_code = 401


class ForbiddenError(TournamentError):
    """The action can never be performed by this caller"""

    status_code = 403


class NotAllowedError(TournamentError):
    """The action is not allowed in the tournament's current state"""

    status_code = 405
