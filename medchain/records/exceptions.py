"""
Record store exceptions.
"""
from fastapi import status
from ..exceptions import AppException

class EmptyPayloadReferenceException(AppException):
    code = "EmptyPayloadReference"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Payload reference is required"

class RecordNotFoundException(AppException):
    """Exception raised when a record id was never assigned."""
    code = "RecordNotFound"
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Record not found"
