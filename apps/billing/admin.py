from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import PaymentRecord
from .services import BillingLedger


@admin.register(PaymentRecord)
class PaymentRecordAdmin(admin.ModelAdmin):
    """
    Read-only view of the ledger.

    Records are created by the monthly batch or the API, repriced only by fee
    propagation and never deleted, so the admin can only change status through
    the ledger actions.
    """
    list_display = [
        'id', 'student_link', 'grade_name', 'year', 'month',
        'amount', 'status', 'due_date', 'paid_date'
    ]
    list_filter = ['status', 'year', 'month', 'student__grade']
    search_fields = ['student__user__username', 'student__user__first_name', 'student__user__last_name']
    readonly_fields = [
        'student', 'year', 'month', 'amount', 'status', 'due_date', 'paid_date',
        'created_at', 'updated_at'
    ]
    ordering = ['-year', '-month', 'student__grade__level', 'student_id']
    actions = ['mark_paid', 'mark_unpaid']

    fieldsets = (
        ('Basic Information', {
            'fields': ('student', 'year', 'month')
        }),
        ('Payment Details', {
            'fields': ('amount', 'status', 'due_date', 'paid_date')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('student__user', 'student__grade')

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False

    def student_link(self, obj):
        url = reverse('admin:students_student_change', args=[obj.student_id])
        return format_html('<a href="{}">{}</a>', url, obj.student.user.username)
    student_link.short_description = 'Student'

    def grade_name(self, obj):
        return obj.student.grade.name
    grade_name.short_description = 'Grade'

    def _set_status(self, request, queryset, new_status):
        ledger = BillingLedger()
        record_ids = list(queryset.values_list('id', flat=True))
        for record_id in record_ids:
            ledger.set_status(record_id, new_status)
        self.message_user(request, f'{len(record_ids)} payment(s) marked {new_status.lower()}.')

    def mark_paid(self, request, queryset):
        self._set_status(request, queryset, PaymentRecord.STATUS_PAID)
    mark_paid.short_description = 'Mark selected payments as paid'

    def mark_unpaid(self, request, queryset):
        self._set_status(request, queryset, PaymentRecord.STATUS_UNPAID)
    mark_unpaid.short_description = 'Mark selected payments as unpaid'
