#scheduling/urls.py
from django.urls import path
from . import views

app_name = 'scheduling'

urlpatterns = [
    path('availability/', views.AvailabilityListCreateView.as_view(), name='availability_list'),
    path('availability/<int:pk>/', views.AvailabilityDetailView.as_view(), name='availability_detail'),
    path('meetings/', views.MeetingListCreateView.as_view(), name='meeting_list'),
    path('meetings/check/', views.MeetingCheckView.as_view(), name='meeting_check'),
    path('meetings/mine/', views.TutorMeetingListView.as_view(), name='my_meetings'),
    path('meetings/<int:pk>/', views.MeetingDetailView.as_view(), name='meeting_detail'),
]
