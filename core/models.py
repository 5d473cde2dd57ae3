"""
Database models for the hospital record backend.

Each model is a plain record exposed through a REST resource.  The
location records (country, state, district) carry a single name field
named after the entity itself, mirroring the payloads the front-end
sends.  Relations are optional and are cleared when the referenced row
goes away.
"""
from __future__ import annotations

from django.db import models


class Country(models.Model):
    country = models.CharField(max_length=100)

    def __str__(self) -> str:
        return self.country


class State(models.Model):
    state = models.CharField(max_length=100)

    def __str__(self) -> str:
        return self.state


class District(models.Model):
    district = models.CharField(max_length=100)

    def __str__(self) -> str:
        return self.district


class Patient(models.Model):
    """A registered patient and where they live."""

    GENDER_CHOICES = [
        ('MALE', 'Male'),
        ('FEMALE', 'Female'),
        ('OTHER', 'Other'),
    ]

    name = models.CharField(max_length=255)
    age = models.PositiveIntegerField(null=True, blank=True)
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, blank=True)
    phone = models.CharField(max_length=32, blank=True)
    address = models.CharField(max_length=255, blank=True)
    district = models.ForeignKey(
        District, on_delete=models.SET_NULL, null=True, blank=True, related_name='patients'
    )
    state = models.ForeignKey(
        State, on_delete=models.SET_NULL, null=True, blank=True, related_name='patients'
    )
    country = models.ForeignKey(
        Country, on_delete=models.SET_NULL, null=True, blank=True, related_name='patients'
    )

    def __str__(self) -> str:
        return f"{self.name} ({self.pk})"


class Appointment(models.Model):
    date = models.DateTimeField(null=True, blank=True)
    reason = models.CharField(max_length=255, blank=True)
    patient = models.ForeignKey(
        Patient, on_delete=models.SET_NULL, null=True, blank=True, related_name='appointments'
    )

    def __str__(self) -> str:
        return f"Appointment {self.pk} at {self.date}"
