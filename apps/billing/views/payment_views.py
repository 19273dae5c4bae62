"""
Payment record views: listing, manual creation and status changes.
"""
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser

from apps.common.utils import success_response, error_response, paginated_response
from ..period import BillingPeriod
from ..serializers import (
    PaymentRecordSerializer, PaymentCreateSerializer,
    PaymentStatusUpdateSerializer, PaymentListQuerySerializer
)
from ..services import BillingLedger


@api_view(['GET', 'POST'])
@permission_classes([IsAdminUser])
def payment_records(request):
    """List payment records filtered by period, grade or student, or create one"""
    if request.method == 'POST':
        return _create_payment_record(request)

    query = PaymentListQuerySerializer(data=request.query_params)
    if not query.is_valid():
        return error_response("Invalid filters", query.errors)

    records = BillingLedger.search(
        period=query.to_period(),
        grade_id=query.validated_data.get('grade_id'),
        student_id=query.validated_data.get('student_id'),
    )
    return paginated_response(records, PaymentRecordSerializer, request)


def _create_payment_record(request):
    serializer = PaymentCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response("Invalid payment data", serializer.errors)

    data = serializer.validated_data
    record = BillingLedger().create(
        data['student_id'],
        BillingPeriod(year=data['year'], month=data['month']),
        amount=data.get('amount'),
        due_date=data.get('due_date'),
    )
    record = BillingLedger.get_record(record.id)

    return success_response(
        data=PaymentRecordSerializer(record).data,
        message="Payment record created",
        status_code=status.HTTP_201_CREATED
    )


@api_view(['GET'])
@permission_classes([IsAdminUser])
def payment_record_detail(request, record_id):
    record = BillingLedger.get_record(record_id)
    return success_response(PaymentRecordSerializer(record).data)


@api_view(['PATCH'])
@permission_classes([IsAdminUser])
def update_payment_status(request, record_id):
    """Mark a record PAID or UNPAID; paying the current month unlocks the account"""
    serializer = PaymentStatusUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response("Invalid status", serializer.errors)

    new_status = serializer.validated_data['status']
    BillingLedger().set_status(record_id, new_status)
    record = BillingLedger.get_record(record_id)

    return success_response(
        data=PaymentRecordSerializer(record).data,
        message=f"Payment marked as {new_status.lower()}"
    )
