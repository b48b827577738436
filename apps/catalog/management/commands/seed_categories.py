"""
Management command to seed the default product categories.

Usage:
    python manage.py seed_categories [--dry-run]

Existing categories are left untouched; only missing defaults are created.
"""

from django.core.management.base import BaseCommand

from apps.catalog.models import Category
from apps.catalog.services import DEFAULT_CATEGORIES, seed_default_categories


class Command(BaseCommand):
    help = 'Create any missing default categories'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show which categories would be created without making changes',
        )

    def handle(self, *args, **options):
        existing = set(Category.objects.values_list('category_id', flat=True))
        missing = [
            (category_id, label)
            for category_id, label, _icon in DEFAULT_CATEGORIES
            if category_id not in existing
        ]

        if not missing:
            self.stdout.write(
                self.style.SUCCESS('All default categories already exist.')
            )
            return

        self.stdout.write(f'\nFound {len(missing)} missing default categor(ies):\n')
        for category_id, label in missing:
            self.stdout.write(f'  - {category_id} ({label})')

        if options['dry_run']:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        created = seed_default_categories()
        self.stdout.write(
            self.style.SUCCESS(f'\nCreated {created} categor(ies).')
        )
