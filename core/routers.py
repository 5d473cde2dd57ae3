"""
URL mappings for the hospital record API.

Every entity resource contributes a collection route
(``api/<plural>``) and a detail route (``api/<plural>/<id>``).
Trailing slashes are deliberately omitted to match the front-end.
"""
from django.urls import path, include

from .views import health
from .views.entities import RESOURCES


urlpatterns = [
    # exposes /metrics
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz),
]

for resource in RESOURCES:
    urlpatterns += resource.urls()
