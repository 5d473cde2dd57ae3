"""
WSGI config for the hospital record backend.

Exposes the WSGI callable as a module-level variable named
``application`` for gunicorn/uwsgi.
"""
import os

from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'hospital.settings')

application = get_wsgi_application()
