import bleach
from django.db import models
from rest_framework import serializers

from core.models import Appointment, Country, District, Patient, State


class SanitizedCharField(serializers.CharField):
    """Char field that strips markup from incoming text."""

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return bleach.clean(value, tags=set(), strip=True)


class EntityReferenceField(serializers.PrimaryKeyRelatedField):
    """Related entity given either as its id or as ``{"id": n, ...}``."""

    def to_internal_value(self, data):
        if isinstance(data, dict):
            data = data.get('id')
            if data is None:
                self.fail('required')
        return super().to_internal_value(data)


class EntitySerializer(serializers.ModelSerializer):
    serializer_field_mapping = {
        **serializers.ModelSerializer.serializer_field_mapping,
        models.CharField: SanitizedCharField,
    }
    serializer_related_field = EntityReferenceField


class CountrySerializer(EntitySerializer):
    class Meta:
        model = Country
        fields = ['id', 'country']


class StateSerializer(EntitySerializer):
    class Meta:
        model = State
        fields = ['id', 'state']


class DistrictSerializer(EntitySerializer):
    class Meta:
        model = District
        fields = ['id', 'district']


class PatientSerializer(EntitySerializer):
    class Meta:
        model = Patient
        fields = ['id', 'name', 'age', 'gender', 'phone', 'address', 'district', 'state', 'country']


class AppointmentSerializer(EntitySerializer):
    class Meta:
        model = Appointment
        fields = ['id', 'date', 'reason', 'patient']
