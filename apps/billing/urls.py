from django.urls import path
from . import views

app_name = 'billing'

urlpatterns = [
    # Payment records
    path('', views.payment_records, name='payment_records'),
    path('<int:record_id>/', views.payment_record_detail, name='payment_record_detail'),
    path('<int:record_id>/status/', views.update_payment_status, name='update_payment_status'),

    # Period operations
    path('batch/', views.generate_batch, name='generate_batch'),
    path('sweep/', views.sweep_overdue, name='sweep_overdue'),
    path('summary/', views.period_summary, name='period_summary'),
]
