import logging

from django.db.models import Count
from django.http import JsonResponse
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .cipher import get_cipher
from .generator import generate
from .models import Category, PasswordEntry
from .serializers import (
    CategoryDetailSerializer, CategorySerializer, GenerateSerializer, PasswordSerializer,
)

logger = logging.getLogger(__name__)

class IsOwner(permissions.BasePermission):
    def has_object_permission(self, request, view, obj):
        return getattr(obj, "owner_id", None) == request.user.id
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated)

class CategoryViewSet(viewsets.ModelViewSet):
    serializer_class = CategorySerializer
    permission_classes = [IsOwner]
    def get_queryset(self):
        return (Category.objects.filter(owner=self.request.user)
                .annotate(password_count=Count("passwords")))
    def get_serializer_class(self):
        if self.action == "retrieve":
            return CategoryDetailSerializer
        return CategorySerializer
    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)
    def perform_destroy(self, instance):
        # les entrées restent, category_id passe à NULL (SET_NULL)
        logger.info("Category %s deleted by user %s", instance.pk, self.request.user.pk)
        instance.delete()

class PasswordViewSet(viewsets.ModelViewSet):
    serializer_class = PasswordSerializer
    permission_classes = [IsOwner]

    def get_cipher(self):
        return get_cipher()

    def get_queryset(self):
        qs = PasswordEntry.objects.filter(owner=self.request.user).select_related("category")
        category_id = self.request.query_params.get("categoryId")
        if category_id:
            qs = qs.filter(category_id=category_id) if category_id.isdigit() else qs.none()
        return qs

    def get_serializer_context(self):
        ctx = super().get_serializer_context()
        ctx["cipher"] = self.get_cipher()
        # une entrée illisible ne bloque pas toute la liste
        ctx["skip_undecryptable"] = self.action == "list"
        return ctx

    def perform_create(self, serializer):
        entry = serializer.save(owner=self.request.user)
        logger.info("Password entry %s created by user %s", entry.pk, self.request.user.pk)

    def perform_update(self, serializer):
        entry = serializer.save()
        logger.info("Password entry %s updated by user %s", entry.pk, self.request.user.pk)

    def perform_destroy(self, instance):
        logger.info("Password entry %s deleted by user %s", instance.pk, self.request.user.pk)
        instance.delete()


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def generate_password(request):
    serializer = GenerateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    policy = serializer.to_policy()
    password = generate(policy)
    return Response({"password": password, "length": policy.length}, status=status.HTTP_200_OK)


def healthz(_request):
    return JsonResponse({"status": "ok"})
