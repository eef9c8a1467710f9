# settings.py
import os
from datetime import timedelta
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured

# ───────────────────────── Base ─────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

def env(name, default=None, required=False):
    """petit helper env avec 'required' optionnel"""
    v = os.environ.get(name, default)
    if required and (v is None or str(v).strip() == ""):
        raise ImproperlyConfigured(f"Missing env: {name}")
    return v

def env_bool(name, default="false"):
    return str(env(name, default)).lower() in {"1", "true", "yes"}

def env_list(name, default=""):
    """split par virgules, espaces ignorés"""
    raw = env(name, default=default) or ""
    return [item.strip() for item in raw.split(",") if item.strip()]

# ───────────────────────── Mode (dev/prod) ─────────────────────────
# Par défaut on se comporte comme DEV (True), et on met DJANGO_DEBUG=false en prod.
DEBUG = env_bool("DJANGO_DEBUG", "true")

# ───────────────────────── Secret key ─────────────────────────
# En dev : valeur par défaut; en prod : OBLIGATOIRE
SECRET_KEY = env("DJANGO_SECRET_KEY", default="dev-secret", required=not DEBUG)

# ───────────────────────── Chiffrement des mots de passe ─────────────────────────
# Lu une seule fois; api.apps.ApiConfig.ready() refuse de démarrer sans clé (MissingKey).
# Ne jamais logguer cette valeur.
PASSFORGE_ENCRYPTION_KEY = env("PASSFORGE_ENCRYPTION_KEY")

# ───────────────────────── Hôtes ─────────────────────────
if DEBUG:
    ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,0.0.0.0")
else:
    ALLOWED_HOSTS = env_list("DJANGO_ALLOWED_HOSTS", "passforge.example.com")

# ───────────────────────── Apps ─────────────────────────
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "corsheaders",
    "api.apps.ApiConfig",
]

# ───────────────────────── Middleware ─────────────────────────
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",
    "corsheaders.middleware.CorsMiddleware",            # CORS avant Session
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "passforge.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

WSGI_APPLICATION = "passforge.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ───────────────────────── Base de données ─────────────────────────
# postgresql (défaut) ou sqlite pour le dev local
DB_ENGINE = str(env("DJANGO_DB_ENGINE", "postgresql")).lower()

if DB_ENGINE == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": env("SQLITE_PATH", str(BASE_DIR / "db.sqlite3")),
        }
    }
elif DB_ENGINE == "postgresql":
    DB_USER = env("POSTGRES_USER", required=True)
    DB_PASS = env("POSTGRES_PASSWORD", required=True)
    DB_HOST = env("POSTGRES_HOST", default="db")
    DB_PORT = env("POSTGRES_PORT", default="5432")
    DB_NAME = env("POSTGRES_DB", required=True)

    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": DB_NAME,
            "USER": DB_USER,
            "PASSWORD": DB_PASS,
            "HOST": DB_HOST,
            "PORT": DB_PORT,
        }
    }
else:
    raise ImproperlyConfigured(f"Unsupported DJANGO_DB_ENGINE: {DB_ENGINE}")

# ───────────────────────── Auth ─────────────────────────
AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
     "OPTIONS": {"min_length": 6}},
]

# ───────────────────────── DRF ─────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework_simplejwt.authentication.JWTAuthentication",
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework.authentication.BasicAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "EXCEPTION_HANDLER": "api.exceptions.exception_handler",
}

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=int(env("ACCESS_TOKEN_LIFETIME_MIN", "30"))),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=int(env("REFRESH_TOKEN_LIFETIME_DAYS", "7"))),
}

# ───────────────────────── Logs ─────────────────────────
LOG_LEVEL = str(env("DJANGO_LOG_LEVEL", "DEBUG" if DEBUG else "INFO")).upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {"format": "%(asctime)s %(levelname)s [%(name)s] %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "verbose"},
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        "django.db.backends": {"level": "INFO"},
    },
}

# ───────────────────────── Statique / WhiteNoise ─────────────────────────
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedStaticFilesStorage" if DEBUG
        else "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# ───────────────────────── HTTPS/Proxy ─────────────────────────
# Apache/Nginx gère TLS; on évite la redirection ici pour ne pas boucler
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = False

# ───────────────────────── Cookies (sessions/CSRF) ─────────────────────────
SESSION_COOKIE_SECURE = not DEBUG
CSRF_COOKIE_SECURE   = not DEBUG
SESSION_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SAMESITE    = "Lax"

# ───────────── CORS / CSRF ─────────────
CORS_ALLOW_CREDENTIALS = True
if DEBUG:
    CORS_ALLOWED_ORIGINS = env_list("CORS_ALLOWED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
    CSRF_TRUSTED_ORIGINS = env_list("CSRF_TRUSTED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
else:
    CORS_ALLOWED_ORIGINS = env_list("CORS_ALLOWED_ORIGINS", "https://passforge.example.com")
    CSRF_TRUSTED_ORIGINS = env_list("CSRF_TRUSTED_ORIGINS", "https://passforge.example.com")
