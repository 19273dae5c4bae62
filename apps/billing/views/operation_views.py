"""
Period-wide billing operations: batch generation, overdue sweep and summaries.
"""
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser

from apps.common.utils import success_response, error_response
from ..serializers import PeriodSerializer, SweepRequestSerializer, PeriodSummarySerializer
from ..services import AccessGate, BatchGenerator, BillingLedger


@api_view(['POST'])
@permission_classes([IsAdminUser])
def generate_batch(request):
    """Bill every active, approved student for a month at their grade's fee"""
    serializer = PeriodSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response("Invalid period", serializer.errors)

    result = BatchGenerator().generate(serializer.to_period())

    return success_response(
        data=result.as_dict(),
        message=(
            f"Generated {result.created} payment record(s) for {result.period}. "
            f"{result.already_existed} already existed."
        )
    )


@api_view(['POST'])
@permission_classes([IsAdminUser])
def sweep_overdue(request):
    """Lock accounts with overdue unpaid records and unlock paid ones"""
    serializer = SweepRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return error_response("Invalid sweep request", serializer.errors)

    result = AccessGate().sweep_overdue(
        serializer.to_period(),
        now=serializer.validated_data.get('now'),
    )

    return success_response(
        data=result.as_dict(),
        message=f"Sweep complete: {result.locked} locked, {result.unlocked} unlocked"
    )


@api_view(['GET'])
@permission_classes([IsAdminUser])
def period_summary(request):
    serializer = PeriodSerializer(data=request.query_params)
    if not serializer.is_valid():
        return error_response("Invalid period", serializer.errors)

    summary = BillingLedger.period_summary(serializer.to_period())
    return success_response(PeriodSummarySerializer(summary.as_dict()).data)
