from django.urls import path
from . import views

urlpatterns = [
    path('<int:student_id>/payments/', views.StudentPaymentHistoryView.as_view(), name='student-payments'),
    path('<int:student_id>/access/', views.StudentAccessView.as_view(), name='student-access'),
    path('me/payments/', views.MyPaymentHistoryView.as_view(), name='my-payments'),
    path('me/access/', views.MyAccessView.as_view(), name='my-access'),
]
