#coursework/urls.py
from django.urls import path
from . import views

app_name = 'coursework'

urlpatterns = [
    path('assignments/mine/', views.StudentAssignmentListView.as_view(), name='my_assignments'),
    path('assignments/<int:pk>/submit/', views.SubmitAssignmentView.as_view(), name='submit_assignment'),
    path('assignments/<int:pk>/submissions/', views.AssignmentSubmissionListView.as_view(), name='assignment_submissions'),
    path('submissions/<int:pk>/grade/', views.GradeSubmissionView.as_view(), name='grade_submission'),
    path('quizzes/mine/', views.StudentQuizListView.as_view(), name='my_quizzes'),
]
