import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.getenv(
    "SECRET_KEY",
    "django-insecure-3k!v9q#t2w_teamup-^p8m0x4r@h6z$y1b7n5c(e)d&f*g+j",
)

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv("DEBUG", "True").lower() == "true"

# Environment configuration
ENV = os.getenv("ENV", "DEVELOPMENT").upper()

# Allowed hosts configuration
ALLOWED_HOSTS = os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

# Database configuration
MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
DB_NAME = os.getenv("DB_NAME", "teamup")
MONGODB_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "5000"))

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "corsheaders",
    "rest_framework",
    "drf_spectacular",
    "teamup",
    "django.contrib.auth",
    "django.contrib.contenttypes",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.common.CommonMiddleware",
    "teamup.middlewares.jwt_auth.JWTAuthenticationMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

# Add CORS middleware for all environments
MIDDLEWARE.insert(0, "corsheaders.middleware.CorsMiddleware")

ROOT_URLCONF = "teamup_project.urls"
WSGI_APPLICATION = "teamup_project.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
            ],
        },
    },
]

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "teamup.exceptions.exception_handler.handle_exception",
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# Testing configuration
TESTING = "test" in sys.argv or "pytest" in sys.modules or os.getenv("TESTING") == "True"

if TESTING:
    # Test JWT configuration (HS256 - simpler for tests)
    JWT_CONFIG = {
        "ALGORITHM": "HS256",
        "PRIVATE_KEY": "test-secret-key-for-jwt-signing-very-long-key-needed-for-security",
        "PUBLIC_KEY": "test-secret-key-for-jwt-signing-very-long-key-needed-for-security",
        "ACCESS_TOKEN_LIFETIME": int(os.getenv("ACCESS_LIFETIME", "3600")),
        "REFRESH_TOKEN_LIFETIME": int(os.getenv("REFRESH_LIFETIME", "604800")),
    }
else:
    JWT_CONFIG = {
        "ALGORITHM": os.getenv("JWT_ALGORITHM", "RS256"),
        "PRIVATE_KEY": os.getenv("JWT_PRIVATE_KEY"),
        "PUBLIC_KEY": os.getenv("JWT_PUBLIC_KEY"),
        "ACCESS_TOKEN_LIFETIME": int(os.getenv("ACCESS_LIFETIME", "3600")),
        "REFRESH_TOKEN_LIFETIME": int(os.getenv("REFRESH_LIFETIME", "604800")),
    }

COOKIE_SETTINGS = {
    "ACCESS_COOKIE_NAME": os.getenv("ACCESS_TOKEN_COOKIE_NAME", "teamup-access"),
    "REFRESH_COOKIE_NAME": os.getenv("REFRESH_TOKEN_COOKIE_NAME", "teamup-refresh"),
    "COOKIE_DOMAIN": os.getenv("COOKIE_DOMAIN", None),
    "COOKIE_SECURE": os.getenv("COOKIE_SECURE", "False").lower() == "true",
    "COOKIE_HTTPONLY": True,
    "COOKIE_SAMESITE": os.getenv("COOKIE_SAMESITE", "Lax"),
    "COOKIE_PATH": "/",
}

# Team registry tuning
TEAM_SETTINGS = {
    "TEAM_CODE_MAX_ATTEMPTS": int(os.getenv("TEAM_CODE_MAX_ATTEMPTS", "5")),
    "MEMBERSHIP_WRITE_ATTEMPTS": int(os.getenv("MEMBERSHIP_WRITE_ATTEMPTS", "3")),
}

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:" if TESTING else BASE_DIR / "db.sqlite3",
    }
}

PUBLIC_PATHS = [
    "/favicon.ico",
    "/v1/health",
    "/api/docs",
    "/api/docs/",
    "/api/schema",
    "/api/schema/",
    "/api/redoc",
    "/api/redoc/",
    "/static/",
]

# CORS Configuration
CORS_ALLOW_CREDENTIALS = os.getenv("CORS_ALLOW_CREDENTIALS", "True").lower() == "true"
CORS_ALLOW_ALL_ORIGINS = os.getenv("CORS_ALLOW_ALL_ORIGINS", "True").lower() == "true"

if not CORS_ALLOW_ALL_ORIGINS:
    CORS_ALLOWED_ORIGINS = os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")

CORS_ALLOWED_HEADERS = [
    "accept",
    "accept-encoding",
    "authorization",
    "content-type",
    "dnt",
    "origin",
    "user-agent",
    "x-csrftoken",
    "x-requested-with",
]

# Security Settings
SECURE_SSL_REDIRECT = os.getenv("SECURE_SSL_REDIRECT", "False").lower() == "true"
CSRF_COOKIE_SECURE = os.getenv("CSRF_COOKIE_SECURE", "False").lower() == "true"

# Swagger/OpenAPI Configuration
SPECTACULAR_SETTINGS = {
    "TITLE": "TeamUp API",
    "DESCRIPTION": "Hackathon team formation: teams, team codes, join requests and skill matching",
    "VERSION": "1.0.0",
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/v1/",
    "TAGS": [
        {"name": "teams", "description": "Team registry and membership operations"},
        {"name": "join-requests", "description": "Requests to join a team and their review"},
        {"name": "skill-match", "description": "Skill based candidate matching"},
        {"name": "profiles", "description": "User profiles"},
        {"name": "health", "description": "Health check endpoints"},
    ],
}

STATIC_URL = "/static/"
