"""
Student-facing billing views: payment history and access status.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAdminUser, IsAuthenticated

from apps.common.utils import success_response
from apps.billing.serializers import AccessStatusSerializer, StudentPaymentRecordSerializer
from apps.billing.services import AccessGate, BillingLedger
from ..services import StudentDirectory


def _history_payload(student_id):
    summary = BillingLedger.student_summary(student_id)
    records = BillingLedger.student_history(student_id)
    return {
        'summary': summary.as_dict(),
        'payments': StudentPaymentRecordSerializer(records, many=True).data,
    }


class StudentPaymentHistoryView(APIView):
    """Payment history of one student, newest period first"""
    permission_classes = [IsAdminUser]

    def get(self, request, student_id):
        return success_response(_history_payload(student_id))


class StudentAccessView(APIView):
    """Whether a student may currently use gated content"""
    permission_classes = [IsAdminUser]

    def get(self, request, student_id):
        access = AccessGate().get_account_access(student_id)
        return success_response(AccessStatusSerializer(access.as_dict()).data)


class MyPaymentHistoryView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        student = StudentDirectory.get_for_user(request.user)
        return success_response(_history_payload(student.id))


class MyAccessView(APIView):
    """Access status of the signed-in student"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        student = StudentDirectory.get_for_user(request.user)
        access = AccessGate().get_account_access(student.id)
        return success_response(AccessStatusSerializer(access.as_dict()).data)
