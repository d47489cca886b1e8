# backend/users/views.py
from django.db.models import Q
from drf_spectacular.utils import extend_schema
from rest_framework import generics, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .models import User
from .permissions import IsAdminOrTutor
from .serializers import UserSerializer, UserSummarySerializer


class UserProfileView(APIView):
    """Profile of the signed-in user."""
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: UserSerializer}, operation_id="user_profile")
    def get(self, request):
        return Response(UserSerializer(request.user).data, status=status.HTTP_200_OK)

    @extend_schema(request=UserSerializer, responses={200: UserSerializer}, operation_id="user_profile_update")
    def patch(self, request):
        serializer = UserSerializer(request.user, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response(serializer.data, status=status.HTTP_200_OK)


class TutorListView(generics.ListAPIView):
    """Active tutors, used to pick the tutor of a new section."""
    serializer_class = UserSummarySerializer
    permission_classes = [IsAdminOrTutor]

    def get_queryset(self):
        return User.objects.tutors().order_by('first_name', 'last_name')


class UserSearchView(APIView):
    permission_classes = [IsAdminOrTutor]

    def get(self, request):
        q = (request.query_params.get("q") or "").strip()
        if not q:
            return Response([], status=200)

        qs = User.objects.all()
        if "@" in q:
            qs = qs.filter(email__icontains=q)
        else:
            qs = qs.filter(Q(first_name__icontains=q) | Q(last_name__icontains=q))
        role = request.query_params.get("role")
        if role:
            qs = qs.filter(role=role.upper())
        data = UserSummarySerializer(qs.order_by("email")[:10], many=True).data
        return Response(data, status=200)
