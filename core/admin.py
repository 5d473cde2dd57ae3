"""
Django admin registrations for the record models.

Lets superusers inspect and correct rows via ``/admin/`` during
development.
"""

from django.contrib import admin

from .models import Appointment, Country, District, Patient, State


@admin.register(Country)
class CountryAdmin(admin.ModelAdmin):
    list_display = ('id', 'country')
    search_fields = ('country',)


@admin.register(State)
class StateAdmin(admin.ModelAdmin):
    list_display = ('id', 'state')
    search_fields = ('state',)


@admin.register(District)
class DistrictAdmin(admin.ModelAdmin):
    list_display = ('id', 'district')
    search_fields = ('district',)


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'age', 'gender', 'phone', 'district', 'state', 'country')
    list_filter = ('gender', 'country', 'state')
    search_fields = ('name', 'phone', 'address')


@admin.register(Appointment)
class AppointmentAdmin(admin.ModelAdmin):
    list_display = ('id', 'date', 'patient', 'reason')
    list_filter = ('date',)
    search_fields = ('reason', 'patient__name')
