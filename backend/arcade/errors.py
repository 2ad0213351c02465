"""Domain errors and their HTTP mapping.

Every error raised by the account and catalog services derives from
``ArcadeError``. The request boundary turns them into a JSON body of the form
``{"success": false, "message": ...}`` with the error's status code.
"""

from flask import jsonify
from werkzeug.exceptions import HTTPException


class ArcadeError(Exception):
    status_code = 400
    message = 'Request failed'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(ArcadeError):
    status_code = 400
    message = 'Invalid request data'


class AuthenticationRequired(ArcadeError):
    status_code = 401
    message = 'Authentication required'


class InvalidCredentials(ArcadeError):
    # Same message for unknown user and wrong password
    status_code = 401
    message = 'Invalid username or password'

    def __init__(self):
        super().__init__()


class InvalidToken(ArcadeError):
    """Token could not be resolved to a user.

    ``reason`` keeps the internal classification for logging; clients only
    ever see the generic message.
    """
    status_code = 403
    message = 'Invalid or expired token'
    reason = 'invalid'

    def __init__(self, reason=None):
        super().__init__()
        if reason:
            self.reason = reason


class TokenExpired(InvalidToken):
    reason = 'expired'


class TokenMalformed(InvalidToken):
    reason = 'malformed'


class TokenSignatureInvalid(InvalidToken):
    reason = 'invalid_signature'


class Forbidden(ArcadeError):
    status_code = 403
    message = 'Admin privileges required'


class NotFound(ArcadeError):
    status_code = 404
    message = 'Not found'


class DuplicateIdentity(ArcadeError):
    status_code = 409
    message = 'Username or email already registered'


def register_error_handlers(flask_app):
    @flask_app.errorhandler(ArcadeError)
    def handle_arcade_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'success': False, 'message': exc.description}), exc.code
