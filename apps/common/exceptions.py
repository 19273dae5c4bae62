"""
Billing error taxonomy and the custom exception handler for consistent API responses
"""
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
import logging

logger = logging.getLogger(__name__)


class BillingError(Exception):
    """Base class for errors raised by the billing core"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Billing error'

    def __init__(self, message=None, **details):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class ValidationError(BillingError):
    """Malformed input: negative fee, out-of-range month/year, missing id"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Validation error'


class NotFound(BillingError):
    """Referenced grade, student or payment record does not exist"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Resource not found'


class DuplicateRecord(BillingError):
    """A payment record already exists for the (student, period) pair"""
    status_code = status.HTTP_409_CONFLICT
    default_message = 'Payment record already exists for this period'


class InconsistentStateError(BillingError):
    """
    Lock flag disagrees with ledger truth.

    Only ever logged by the overdue sweep, which heals the account instead of failing.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Account lock state is inconsistent with the ledger'


def custom_exception_handler(exc, context):
    """
    Custom exception handler that returns consistent error responses
    """
    if isinstance(exc, BillingError):
        logger.warning(f"Billing error: {exc.message}")
        data = {
            'code': exc.status_code,
            'msg': exc.message,
        }
        if exc.details:
            data['errors'] = exc.details
        return Response(data, status=exc.status_code)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        # Log the exception
        logger.error(f"API Exception: {exc}", exc_info=True)

        # Create custom error response format
        custom_response_data = {
            'code': response.status_code,
            'msg': 'An error occurred',
            'errors': response.data
        }

        # Handle specific error types
        if response.status_code == status.HTTP_400_BAD_REQUEST:
            custom_response_data['msg'] = 'Validation error'
        elif response.status_code == status.HTTP_401_UNAUTHORIZED:
            custom_response_data['msg'] = 'Authentication required'
        elif response.status_code == status.HTTP_403_FORBIDDEN:
            custom_response_data['msg'] = 'Permission denied'
        elif response.status_code == status.HTTP_404_NOT_FOUND:
            custom_response_data['msg'] = 'Resource not found'
        elif response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            custom_response_data['msg'] = 'Method not allowed'
        elif response.status_code >= 500:
            custom_response_data['msg'] = 'Internal server error'
            # Don't expose internal errors in production
            if not hasattr(context['request'], 'user') or not context['request'].user.is_staff:
                custom_response_data['errors'] = {'detail': 'Internal server error'}

        response.data = custom_response_data

    return response
