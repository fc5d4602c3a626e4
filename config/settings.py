import os
from pathlib import Path

from django.core.management.utils import get_random_secret_key

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', get_random_secret_key())

DEBUG = os.getenv('DJANGO_DEBUG', '') == '1'

ALLOWED_HOSTS = []

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'catalog.apps.CatalogConfig',
]

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': os.getenv('DATABASE_PATH', str(BASE_DIR / 'db.sqlite3')),
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'UTC'
LANGUAGE_CODE = 'en-us'

MEDIA_ROOT = os.getenv('MEDIA_ROOT', str(BASE_DIR / 'media'))
MEDIA_URL = '/media/'

# Celery
CELERY_BROKER_URL = os.getenv('CELERY_BROKER_URL', 'redis://localhost:6379/0')
CELERY_ACCEPT_CONTENT = ['json']
CELERY_TASK_SERIALIZER = 'json'
CELERY_RESULT_SERIALIZER = 'json'

# Feed import
_timeout = os.getenv('FEED_REQUEST_TIMEOUT')
FEED_REQUEST_TIMEOUT = float(_timeout) if _timeout else None  # None = requests default
FEED_USER_AGENT = os.getenv('FEED_USER_AGENT', 'catalog-feed-importer/0.1')

# Bounding boxes (width, height) for derived renditions of image assets.
THUMBNAIL_PRESETS = {
    'thumb_200': (200, 200),
    'thumb_800': (800, 800),
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'long': {
            'format': '[{asctime} {levelname} {name}:{lineno}] {message}',
            'datefmt': '%Y-%m-%dT%H:%M:%S',
            'style': '{',
        },
    },
    'handlers': {
        'stream': {
            'class': 'logging.StreamHandler',
            'formatter': 'long',
        },
    },
    'root': {'handlers': ['stream'], 'level': 'WARNING'},
    'loggers': {
        'catalog': {
            'handlers': ['stream'],
            'level': os.getenv('CATALOG_LOG_LEVEL', 'INFO'),
            'propagate': False,
        },
        'celery': {'handlers': ['stream'], 'level': 'INFO', 'propagate': False},
    },
}
