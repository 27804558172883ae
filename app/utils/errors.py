"""
API error types

Every failure a route can report is one of these. The application factory
renders them as {"success": false, "kind": ..., "message": ...}.
"""


class APIError(Exception):
    """Base class for errors rendered as a JSON envelope"""

    status_code = 500
    kind = 'ServerError'
    default_message = 'An unexpected error occurred'

    def __init__(self, message=None, status_code=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {
            'success': False,
            'kind': self.kind,
            'message': self.message,
        }


class ValidationError(APIError):
    status_code = 400
    kind = 'ValidationError'
    default_message = 'Invalid request'


class AuthenticationError(APIError):
    status_code = 401
    kind = 'AuthenticationError'
    default_message = 'Authentication required'


class InvalidTokenError(AuthenticationError):
    kind = 'InvalidToken'
    default_message = 'Invalid token'


class AuthorizationError(APIError):
    status_code = 403
    kind = 'AuthorizationError'
    default_message = 'Insufficient permissions'


class AccountBlockedError(AuthorizationError):
    """Raised for a deactivated account; names the cookie to clear"""

    kind = 'AccountBlocked'
    default_message = 'Account has been blocked. Please contact support.'

    def __init__(self, message=None, clear_cookie=None):
        super().__init__(message)
        self.clear_cookie = clear_cookie


class NotFoundError(APIError):
    status_code = 404
    kind = 'NotFoundError'
    default_message = 'Resource not found'


class ConflictError(APIError):
    status_code = 409
    kind = 'ConflictError'
    default_message = 'Resource already exists'


class StoreError(APIError):
    status_code = 500
    kind = 'StoreError'
    default_message = 'Database error'
