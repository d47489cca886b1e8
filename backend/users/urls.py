#backend/users/urls.py
from django.urls import path
from . import views

app_name = 'accounts'

urlpatterns = [
    path('profile/', views.UserProfileView.as_view(), name='profile_self'),
    path('tutors/', views.TutorListView.as_view(), name='tutor_list'),
    path('search/', views.UserSearchView.as_view(), name='user_search'),
]
