from django.contrib import admin
from django.utils.html import format_html
from django.urls import reverse
from apps.billing.services import FeePropagator
from .models import Grade


@admin.register(Grade)
class GradeAdmin(admin.ModelAdmin):
    """Admin interface for grades"""

    list_display = ['name', 'level', 'monthly_fee', 'student_count', 'updated_at']
    search_fields = ['name']
    ordering = ['level']
    readonly_fields = ['created_at', 'updated_at', 'student_count']

    fieldsets = (
        ('Basic Information', {
            'fields': ('name', 'level')
        }),
        ('Fees', {
            'fields': ('monthly_fee',),
            'description': 'Saving a new fee also updates every unpaid payment record of this grade.'
        }),
        ('Statistics', {
            'fields': ('student_count',),
            'classes': ('collapse',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        if obj:  # Level is immutable once set
            return self.readonly_fields + ['level']
        return self.readonly_fields

    def student_count(self, obj):
        """Count of students in this grade"""
        count = obj.students.count()
        if count > 0:
            url = reverse('admin:students_student_changelist')
            return format_html(
                '<a href="{}?grade__id__exact={}">{} students</a>',
                url, obj.id, count
            )
        return '0 students'
    student_count.short_description = 'Students'

    def has_delete_permission(self, request, obj=None):
        # Prevent deletion of grades that have students
        if obj and obj.students.exists():
            return False
        return super().has_delete_permission(request, obj)

    def save_model(self, request, obj, form, change):
        if not (change and 'monthly_fee' in form.changed_data):
            super().save_model(request, obj, form, change)
            return

        # Other edited fields are saved at the old fee; the propagator owns the fee write
        new_fee = obj.monthly_fee
        obj.monthly_fee = form.initial['monthly_fee']
        super().save_model(request, obj, form, change)

        result = FeePropagator().update_fee_and_propagate(obj.pk, new_fee)
        obj.monthly_fee = result.grade.monthly_fee
        self.message_user(request, f'{result.records_updated} unpaid payment(s) updated to {obj.monthly_fee}.')
