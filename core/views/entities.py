"""
REST resources for the hospital record entities.

Each resource is wired here with its own ORM-backed repository.
"""
from core.models import Appointment, Country, District, Patient, State
from core.serializers.entities import (
    AppointmentSerializer,
    CountrySerializer,
    DistrictSerializer,
    PatientSerializer,
    StateSerializer,
)
from core.services.repository import ModelRepository

from .resource import EntityResource

country_resource = EntityResource(
    entity_name='country',
    plural='countries',
    repository=ModelRepository(Country),
    serializer_class=CountrySerializer,
)
state_resource = EntityResource(
    entity_name='state',
    repository=ModelRepository(State),
    serializer_class=StateSerializer,
)
district_resource = EntityResource(
    entity_name='district',
    repository=ModelRepository(District),
    serializer_class=DistrictSerializer,
)
patient_resource = EntityResource(
    entity_name='patient',
    repository=ModelRepository(Patient),
    serializer_class=PatientSerializer,
)
appointment_resource = EntityResource(
    entity_name='appointment',
    repository=ModelRepository(Appointment),
    serializer_class=AppointmentSerializer,
)

RESOURCES = (
    country_resource,
    state_resource,
    district_resource,
    patient_resource,
    appointment_resource,
)
