"""
Identity and authorization exceptions.
"""
from fastapi import status
from ..exceptions import AppException

class AlreadyRegisteredException(AppException):
    """Exception raised when an address registers twice."""
    code = "AlreadyRegistered"
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Address already registered"

class InvalidRoleException(AppException):
    """Exception raised when registering with a role other than PATIENT or DOCTOR."""
    code = "InvalidRole"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Role must be PATIENT or DOCTOR"

class EmptyNameException(AppException):
    code = "EmptyName"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Name is required"

class NotRegisteredException(AppException):
    """Exception raised when the caller has not registered."""
    code = "NotRegistered"
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Caller is not registered"

class WrongRoleException(AppException):
    """Exception raised when the caller's role cannot perform the operation."""
    code = "WrongRole"
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Caller role not permitted"

class UnauthorizedException(AppException):
    """Exception raised when the caller may not read the requested data."""
    code = "Unauthorized"
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Not authorized"

class AdminOnlyException(AppException):
    code = "AdminOnly"
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Only the admin can perform this operation"
