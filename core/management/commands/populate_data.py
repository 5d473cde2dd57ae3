"""
Management command to populate the database with test data.
"""
import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from core.models import Appointment, Country, District, Patient, State

COUNTRIES = ['India', 'Nepal', 'Sri Lanka']
STATES = ['Karnataka', 'Kerala', 'Tamil Nadu', 'Maharashtra']
DISTRICTS = ['Bangalore Urban', 'Mysore', 'Ernakulam', 'Chennai', 'Pune', 'Thane']
FIRST_NAMES = ['Asha', 'Ravi', 'Meera', 'Arjun', 'Priya', 'Kiran', 'Divya', 'Sanjay']
LAST_NAMES = ['Rao', 'Nair', 'Iyer', 'Patil', 'Menon', 'Shetty']
REASONS = ['General checkup', 'Follow-up', 'Blood test review', 'Vaccination', 'Consultation']


class Command(BaseCommand):
    help = 'Populate database with test data'

    def add_arguments(self, parser):
        parser.add_argument('--patients', type=int, default=20, help='number of patients to create')
        parser.add_argument('--appointments', type=int, default=3, help='appointments per patient')
        parser.add_argument('--seed', type=int, default=None, help='random seed for repeatable data')

    def handle(self, *args, **options):
        rng = random.Random(options['seed'])
        self.stdout.write('Creating test data...')
        with transaction.atomic():
            countries = self.create_named(Country, 'country', COUNTRIES)
            states = self.create_named(State, 'state', STATES)
            districts = self.create_named(District, 'district', DISTRICTS)
            patients = self.create_patients(rng, options['patients'], countries, states, districts)
            appointments = self.create_appointments(rng, patients, options['appointments'])
        self.stdout.write(self.style.SUCCESS(
            f'Done: {len(countries)} countries, {len(states)} states, {len(districts)} districts, '
            f'{len(patients)} patients, {appointments} appointments'
        ))

    def create_named(self, model, field, names):
        rows = []
        for name in names:
            obj, created = model.objects.get_or_create(**{field: name})
            if created:
                self.stdout.write(f'  + {model.__name__} {name}')
            rows.append(obj)
        return rows

    def create_patients(self, rng, count, countries, states, districts):
        patients = []
        for _ in range(count):
            patients.append(Patient.objects.create(
                name=f'{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}',
                age=rng.randint(1, 95),
                gender=rng.choice([c[0] for c in Patient.GENDER_CHOICES]),
                phone=f'9{rng.randint(100000000, 999999999)}',
                address=f'{rng.randint(1, 300)} Main Road',
                district=rng.choice(districts),
                state=rng.choice(states),
                country=rng.choice(countries),
            ))
        return patients

    def create_appointments(self, rng, patients, per_patient):
        now = timezone.now().replace(minute=0, second=0, microsecond=0)
        rows = [
            Appointment(
                date=now + timedelta(days=rng.randint(-30, 30), hours=rng.randint(8, 17) - now.hour),
                reason=rng.choice(REASONS),
                patient=patient,
            )
            for patient in patients
            for _ in range(per_patient)
        ]
        Appointment.objects.bulk_create(rows)
        return len(rows)
