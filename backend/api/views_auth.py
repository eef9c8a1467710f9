# backend/api/views_auth.py
import json
import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.http import JsonResponse
from django.views.decorators.csrf import ensure_csrf_cookie, csrf_protect
from django.views.decorators.http import require_POST, require_GET
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .serializers import RegisterSerializer

logger = logging.getLogger(__name__)

@ensure_csrf_cookie
@require_GET
def csrf(request):
    return JsonResponse({}, status=204)

def _resolve_username(identifier):
    """Accepte un nom d'utilisateur ou une adresse courriel."""
    if identifier and "@" in identifier:
        user = get_user_model().objects.filter(email__iexact=identifier).first()
        if user is not None:
            return user.get_username()
    return identifier

@require_POST
@csrf_protect
def login_view(request):
    try:
        data = json.loads(request.body.decode() or "{}")
    except (ValueError, UnicodeDecodeError):
        return JsonResponse({"detail": "Invalid JSON"}, status=400)
    if not isinstance(data, dict):
        return JsonResponse({"detail": "Invalid JSON"}, status=400)

    identifier = data.get("username") or data.get("email")
    password = data.get("password")
    if not isinstance(identifier, str) or not isinstance(password, str):
        return JsonResponse({"detail": "Missing credentials"}, status=400)

    username = _resolve_username(identifier)
    if not username or not password:
        return JsonResponse({"detail": "Missing credentials"}, status=400)

    user = authenticate(request, username=username, password=password)
    if user is None or not user.is_active:
        logger.info("Failed login attempt for %r", username)
        return JsonResponse({"detail": "Invalid credentials"}, status=401)

    login(request, user)
    return JsonResponse({"username": user.get_username()}, status=200)

@require_POST
@csrf_protect
def logout_view(request):
    logout(request)
    return JsonResponse({}, status=204)

@api_view(["POST"])
@permission_classes([AllowAny])
def register_view(request):
    serializer = RegisterSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = serializer.save()
    login(request._request, user, backend="django.contrib.auth.backends.ModelBackend")
    logger.info("User %s registered", user.pk)
    return Response({"id": user.id, "username": user.get_username()}, status=status.HTTP_201_CREATED)
