"""
Seed command: creates the demo accounts and clinic data.

Usage:
    python manage.py seed           # create whatever is missing
    python manage.py seed --flush   # drop the demo data first, then rebuild

Running it twice without --flush creates nothing new.
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from clinic_backend.appointments.seeders import seed_appointments
from clinic_backend.core.seeders import seed_core
from clinic_backend.doctors.seeders import seed_doctors
from clinic_backend.medical.seeders import seed_medical
from clinic_backend.patients.seeders import seed_patients


class Command(BaseCommand):
    help = "Seed database with demo users, doctors, patients, appointments and medical records"

    def add_arguments(self, parser):
        parser.add_argument(
            "--flush",
            action="store_true",
            help="Delete the demo data (and the audit trail) before seeding.",
        )

    def handle(self, *args, **options):
        flush = options.get("flush", False)

        self.stdout.write("=" * 80)
        self.stdout.write("  Clinic seed")
        self.stdout.write("=" * 80)

        try:
            with transaction.atomic():
                stats = {}

                self.stdout.write("\n[1/5] Seeding Core (Users)...")
                section = seed_core(flush=flush)
                stats.update(section)
                self._print_stats(section)

                self.stdout.write("\n[2/5] Seeding Doctors...")
                section = seed_doctors(flush=flush)
                stats.update(section)
                self._print_stats(section)

                self.stdout.write("\n[3/5] Seeding Patients...")
                section = seed_patients(flush=flush)
                stats.update(section)
                self._print_stats(section)

                self.stdout.write("\n[4/5] Seeding Appointments...")
                section = seed_appointments()
                stats.update(section)
                self._print_stats(section)

                self.stdout.write("\n[5/5] Seeding Medical Records...")
                section = seed_medical()
                stats.update(section)
                self._print_stats(section)

                self.stdout.write("\n" + "=" * 80)
                self.stdout.write(self.style.SUCCESS("  Seeding finished"))
                self.stdout.write("=" * 80)
                self._print_summary(stats)

        except Exception as e:
            self.stderr.write(f"\nSeeding failed: {e}")
            raise

    def _print_stats(self, stats):
        for key, value in stats.items():
            self.stdout.write(f"  - {key}: {value}")

    def _print_summary(self, stats):
        self.stdout.write("\nCreated records:")
        for key, value in sorted(stats.items()):
            self.stdout.write(f"  - {key}: {value}")
