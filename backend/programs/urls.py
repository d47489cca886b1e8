#programs/urls.py
from django.urls import path
from . import views

app_name = 'programs'

urlpatterns = [
    path('', views.ProgramListCreateView.as_view(), name='program_list'),
    path('<int:pk>/', views.ProgramDetailView.as_view(), name='program_detail'),
    path('sections/', views.SectionCreateView.as_view(), name='section_create'),
    path('sections/<int:pk>/', views.SectionDetailView.as_view(), name='section_detail'),
    path('sections/<int:pk>/enrollments/', views.SectionEnrollmentListView.as_view(), name='section_enrollments'),
    path('sections/suggestion/', views.SectionSuggestionView.as_view(), name='section_suggestion'),
    path('sections/sync-enrollments/', views.SyncEnrollmentsView.as_view(), name='sync_enrollments'),
    path('enrollments/mine/', views.StudentEnrollmentListView.as_view(), name='my_enrollments'),
]
