from django.contrib import admin
from django.utils.html import format_html
from django.urls import reverse
from .models import Student


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    """Admin interface for students"""

    list_display = [
        'user_link', 'grade', 'approval_status', 'is_active',
        'locked_due_to_payment', 'enrollment_date'
    ]
    list_filter = ['grade', 'approval_status', 'is_active', 'locked_due_to_payment']
    search_fields = ['user__username', 'user__email']
    ordering = ['grade__level', '-enrollment_date']
    # The lock flag follows the ledger; it is changed only by the access gate
    readonly_fields = ['locked_due_to_payment', 'enrollment_date', 'approved_at']

    fieldsets = (
        ('Student', {
            'fields': ('user', 'grade')
        }),
        ('Status', {
            'fields': ('approval_status', 'approved_at', 'is_active', 'locked_due_to_payment')
        }),
        ('Timestamps', {
            'fields': ('enrollment_date',),
            'classes': ('collapse',)
        }),
    )

    def user_link(self, obj):
        """Link to user admin page"""
        url = reverse('admin:users_user_change', args=[obj.user.id])
        return format_html('<a href="{}">{}</a>', url, obj.user.username)
    user_link.short_description = 'User'
    user_link.admin_order_field = 'user__username'

    def get_queryset(self, request):
        """Optimize queryset with related objects"""
        return super().get_queryset(request).select_related('user', 'grade')
