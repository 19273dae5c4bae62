from django.urls import path
from . import views

urlpatterns = [
    path('', views.GradeListView.as_view(), name='grade-list'),
    path('<int:grade_id>/fee/', views.GradeFeeUpdateView.as_view(), name='grade-fee-update'),
]
