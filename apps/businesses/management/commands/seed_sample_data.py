"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py seed_sample_data [--clear]

This creates:
- 4 users (admin, alice, bob, charlie)
- 6 businesses across several categories, one of them unowned
- Reviews from the regular users
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.businesses.models import Business, Category
from apps.reviews.models import Review


SAMPLE_BUSINESSES = [
    {
        'name': 'Corner Espresso Bar',
        'address': '12 Main Street',
        'description': 'Small espresso bar with house-roasted beans.',
        'phone': '+1 555 0100',
        'category_id': Category.CAFE,
        'owner': 'alice',
    },
    {
        'name': 'Luigi Trattoria',
        'address': '48 Harbor Road',
        'description': 'Family-run Italian kitchen, fresh pasta daily.',
        'website': 'https://luigi.example.com',
        'category_id': Category.RESTAURANT,
        'owner': 'alice',
    },
    {
        'name': 'Iron Temple Gym',
        'address': '3 Industrial Park',
        'description': 'Strength training gym open around the clock.',
        'category_id': Category.FITNESS,
        'owner': 'bob',
    },
    {
        'name': 'Page Turner Books',
        'address': '77 Elm Avenue',
        'description': 'Independent bookstore with a reading corner.',
        'category_id': Category.RETAIL,
        'owner': 'bob',
    },
    {
        'name': 'Quick Lube & Tune',
        'address': '900 Route 9',
        'description': 'Oil changes and inspections while you wait.',
        'category_id': Category.AUTOMOTIVE,
        'owner': 'charlie',
    },
    {
        'name': 'Old Town Bakery',
        'address': '5 Market Square',
        'description': 'Listed by the community, waiting for its owner.',
        'category_id': Category.FOOD,
        'owner': None,
    },
]

SAMPLE_REVIEWS = [
    ('Corner Espresso Bar', 'bob', 5, 'Best flat white in town.'),
    ('Corner Espresso Bar', 'charlie', 4, 'Great coffee, a bit crowded at noon.'),
    ('Luigi Trattoria', 'bob', 4, 'Carbonara was excellent.'),
    ('Luigi Trattoria', 'charlie', 3, 'Good food, slow service.'),
    ('Iron Temple Gym', 'alice', 5, 'Clean and well equipped.'),
    ('Page Turner Books', 'charlie', 5, 'Staff recommendations are spot on.'),
    ('Quick Lube & Tune', 'alice', 2, 'Took longer than promised.'),
    ('Old Town Bakery', 'alice', 5, 'Sourdough sells out by ten.'),
]


class Command(BaseCommand):
    help = 'Create sample users, businesses and reviews'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            self.clear_data()

        self.stdout.write('Creating sample data...')

        users = self.create_users()
        businesses = self.create_businesses(users)
        self.create_reviews(users, businesses)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin@example.com / admin123 (superuser)')
        self.stdout.write('  alice@example.com / password123')
        self.stdout.write('  bob@example.com / password123')
        self.stdout.write('  charlie@example.com / password123')

    def clear_data(self):
        """Clear all data from the database."""
        Review.objects.all().delete()
        Business.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(email='admin@example.com').delete()

    def create_users(self):
        """Create test users."""
        self.stdout.write('  Creating users...')

        admin, _ = User.objects.get_or_create(
            email='admin@example.com',
            defaults={
                'username': 'admin',
                'is_staff': True,
                'is_superuser': True,
            }
        )
        admin.set_password('admin123')
        admin.save()

        users = {'admin': admin}
        for username in ('alice', 'bob', 'charlie'):
            user, _ = User.objects.get_or_create(
                email=f'{username}@example.com',
                defaults={'username': username},
            )
            user.set_password('password123')
            user.save()
            users[username] = user

        return users

    def create_businesses(self, users):
        """Create businesses, skipping names that already exist."""
        self.stdout.write('  Creating businesses...')

        businesses = {}
        for data in SAMPLE_BUSINESSES:
            fields = dict(data)
            owner_key = fields.pop('owner')
            business = Business.objects.filter(name=fields['name']).first()
            if business is None:
                business = Business.objects.create(
                    owner=users[owner_key] if owner_key else None,
                    **fields
                )
            businesses[business.name] = business

        return businesses

    def create_reviews(self, users, businesses):
        """Create one review per (business, user) pair."""
        self.stdout.write('  Creating reviews...')

        for business_name, username, rating, comment in SAMPLE_REVIEWS:
            Review.objects.get_or_create(
                business=businesses[business_name],
                user=users[username],
                defaults={'rating': rating, 'comment': comment},
            )
