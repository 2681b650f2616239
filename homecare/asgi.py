"""
ASGI config for the homecare project.

HTTP only; every request is handled by Django's synchronous views.
"""
import os

from django.core.asgi import get_asgi_application  # type: ignore

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "homecare.settings")

application = get_asgi_application()
