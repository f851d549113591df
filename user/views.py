# user/views.py
from rest_framework import permissions, status
from rest_framework.response import Response

from django_wishlist.exceptions import validated_or_raise
from django_wishlist.views import ContextAPIView

from . import services
from .serializers import LoginSerializer, RegisterSerializer, UserSerializer


class RegisterView(ContextAPIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request, format=None):
        data = validated_or_raise(
            RegisterSerializer(data=request.data),
            "Name, email and password are required",
        )
        result = services.register_user(
            self.get_context(request).store,
            name=data["name"],
            email=data["email"],
            password=data["password"],
        )
        return Response(
            {
                "message": "User registered successfully",
                "token": result.token,
                "user": UserSerializer(result.user).data,
            },
            status=status.HTTP_200_OK,
        )


class LoginView(ContextAPIView):
    permission_classes = [permissions.AllowAny]

    def post(self, request, format=None):
        data = validated_or_raise(
            LoginSerializer(data=request.data),
            "Email and password are required",
        )
        result = services.login_user(
            self.get_context(request).store,
            email=data["email"],
            password=data["password"],
        )
        return Response(
            {
                "message": "Login successful",
                "token": result.token,
                "user": UserSerializer(result.user).data,
            },
            status=status.HTTP_200_OK,
        )


class MeView(ContextAPIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request, format=None):
        return Response({"user": UserSerializer(request.user).data})
