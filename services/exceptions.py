# services/exceptions.py
# Every error a service can raise carries the HTTP status it maps to,
# controllers answer with jsonify(error=str(e)), e.status_code.


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)


class RequestValidationError(ServiceError):
    status_code = 400


class NoFieldsProvided(RequestValidationError):
    def __init__(self, message: str = "No fields to update provided."):
        super().__init__(message)


class Unauthenticated(ServiceError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized: No token provided."):
        super().__init__(message)


class AuthorizationFailure(ServiceError):
    status_code = 403


class InvalidCredential(AuthorizationFailure):
    def __init__(self, message: str = "Forbidden: Invalid token or user mismatch."):
        super().__init__(message)


class Forbidden(AuthorizationFailure):
    pass


class UnknownSubject(AuthorizationFailure):
    # valid token, but no local account behind it
    status_code = 404

    def __init__(self, message: str = "User not found in our database."):
        super().__init__(message)


class ResourceNotFound(ServiceError):
    status_code = 404


class ParentNotFound(ResourceNotFound):
    pass


class UniqueConstraintViolation(ServiceError):
    status_code = 409
