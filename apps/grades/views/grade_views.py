"""
Grade listing and fee management views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAdminUser

from apps.common.utils import success_response, error_response
from apps.billing.services import FeePropagator
from ..serializers import GradeSerializer, GradeFeeUpdateSerializer
from ..services import GradeRegistry


class GradeListView(APIView):
    """List all grades with their current fees (public, used by registration)"""
    permission_classes = [AllowAny]

    def get(self, request):
        serializer = GradeSerializer(GradeRegistry.list_grades(), many=True)
        return success_response(serializer.data)


class GradeFeeUpdateView(APIView):
    """Change a grade's monthly fee and cascade it to unpaid payment records"""
    permission_classes = [IsAdminUser]

    def patch(self, request, grade_id):
        serializer = GradeFeeUpdateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response("Invalid fee data", serializer.errors)

        result = FeePropagator().update_fee_and_propagate(
            grade_id, serializer.validated_data['monthly_fee']
        )

        return success_response(
            data={
                'grade': GradeSerializer(result.grade).data,
                'records_updated': result.records_updated,
            },
            message=(
                f"{result.grade.name} fee updated to {result.grade.monthly_fee}. "
                f"{result.records_updated} unpaid payment(s) updated."
            )
        )
