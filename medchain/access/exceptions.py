"""
Permission ledger exceptions.
"""
from fastapi import status
from ..exceptions import AppException

class GranteeNotRegisteredException(AppException):
    """Exception raised when the grantee address never registered."""
    code = "GranteeNotRegistered"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Grantee is not registered"

class GranteeNotDoctorException(AppException):
    """Exception raised when the grantee is registered but not a doctor."""
    code = "GranteeNotDoctor"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Grantee is not a doctor"

class NoActivePermissionException(AppException):
    """Exception raised when revoking a grant that is missing or already revoked."""
    code = "NoActivePermission"
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "No active permission to revoke"
