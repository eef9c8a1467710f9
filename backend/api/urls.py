# backend/api/urls.py
from django.urls import path, include
from rest_framework.routers import DefaultRouter
from rest_framework_simplejwt.views import (
    TokenObtainPairView, TokenRefreshView, TokenVerifyView
)

from .views import CategoryViewSet, PasswordViewSet, generate_password, healthz
from .views_auth import csrf, login_view, logout_view, register_view
from .views_jwt_whoami import jwt_whoami

app_name = "api"

router = DefaultRouter()
router.register(r"categories", CategoryViewSet, basename="category")
router.register(r"passwords",   PasswordViewSet, basename="password")

urlpatterns = [
    # Pas de 'api/' ici : le préfixe 'api/' est ajouté au niveau du projet
    path("", include(router.urls)),

    path("generate/", generate_password, name="generate"),

    # Endpoint santé (utile pour healthchecks / probes)
    path("healthz/", healthz, name="healthz"),

    # Auth (sessions)
    path("csrf/",     csrf,          name="csrf"),
    path("login/",    login_view,    name="login"),
    path("logout/",   logout_view,   name="logout"),
    path("register/", register_view, name="register"),
    path("whoami/",   jwt_whoami,    name="whoami"),

    # Auth (JWT)
    path("auth/jwt/create/",  TokenObtainPairView.as_view(), name="jwt-create"),
    path("auth/jwt/refresh/", TokenRefreshView.as_view(),    name="jwt-refresh"),
    path("auth/jwt/verify/",  TokenVerifyView.as_view(),     name="jwt-verify"),
]
