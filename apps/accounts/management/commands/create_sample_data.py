"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data [--clear]

This creates:
- 4 users (admin, alice, bob, charlie)
- Categories, units and catalog items
- Shopping lists: shared with everyone, private, and shared with one user
- Discount cards with manual identifiers
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import User
from apps.catalog.models import Category, Unit, Item
from apps.lists.models import ShoppingList, ListShare, ListItem
from apps.cards.models import DiscountCard, CardIdentifier


CATALOG = {
    'Dairy': [('Milk', 'l'), ('Butter', 'pcs'), ('Cheese', 'kg'), ('Yogurt', 'pcs')],
    'Bakery': [('Bread', 'pcs'), ('Croissant', 'pcs')],
    'Produce': [('Apples', 'kg'), ('Bananas', 'kg'), ('Tomatoes', 'kg')],
    'Outdoor': [('Tent', 'pcs'), ('Sleeping bag', 'pcs'), ('Gas canister', 'pcs')],
    'Household': [('Dish soap', 'pcs'), ('Paper towels', 'pack')],
}


class Command(BaseCommand):
    help = 'Create sample data for trying out the API'

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
        items = self.create_catalog()
        self.create_lists(users, items)
        self.create_cards(users)

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Test accounts:')
        self.stdout.write('  admin / admin123 (superuser)')
        self.stdout.write('  alice / password123')
        self.stdout.write('  bob / password123')
        self.stdout.write('  charlie / password123')

    def clear_data(self):
        """Clear all data from the database, keeping the fallback category."""
        CardIdentifier.objects.all().delete()
        DiscountCard.objects.all().delete()
        ListItem.objects.all().delete()
        ListShare.objects.all().delete()
        ShoppingList.objects.all().delete()
        Item.objects.all().delete()
        Category.objects.exclude(id=Category.get_default().id).delete()
        Unit.objects.all().delete()
        User.objects.filter(is_superuser=False).delete()
        User.objects.filter(name='admin').delete()

    def _user(self, name, email, password, **extra):
        user, created = User.objects.get_or_create(name=name, defaults={'email': email, **extra})
        if created:
            user.set_password(password)
            user.save(update_fields=['password'])
        return user

    def create_users(self):
        self.stdout.write('  Creating users...')

        users = {
            'admin': self._user('admin', 'admin@example.com', 'admin123', is_staff=True, is_superuser=True),
            'alice': self._user('alice', 'alice@example.com', 'password123'),
            'bob': self._user('bob', 'bob@example.com', 'password123'),
            'charlie': self._user('charlie', 'charlie@example.com', 'password123'),
        }

        self.stdout.write(f'    Created {len(users)} users')
        return users

    def create_catalog(self):
        self.stdout.write('  Creating catalog...')

        Category.get_default()
        items = {}

        for category_name, entries in CATALOG.items():
            category, _ = Category.objects.get_or_create(name=category_name)
            for item_name, unit_name in entries:
                unit, _ = Unit.objects.get_or_create(name=unit_name)
                items[item_name], _ = Item.objects.get_or_create(
                    name=item_name,
                    defaults={'category': category, 'unit': unit},
                )

        self.stdout.write(f'    Created {len(items)} items in {len(CATALOG)} categories')
        return items

    def _list(self, name, owner, is_shared, entries):
        shopping_list, created = ShoppingList.objects.get_or_create(
            name=name,
            defaults={'owner': owner, 'is_shared': is_shared},
        )
        if created:
            for item, quantity, comment in entries:
                ListItem.objects.create(list=shopping_list, item=item, quantity=quantity, comment=comment)
        return shopping_list

    def create_lists(self, users, items):
        self.stdout.write('  Creating shopping lists...')

        self._list('Weekly groceries', users['alice'], True, [
            (items['Milk'], 2, 'semi-skimmed'),
            (items['Bread'], 1, ''),
            (items['Apples'], 1, ''),
            (items['Dish soap'], 1, 'lemon'),
        ])

        camping = self._list('Camping', users['alice'], False, [
            (items['Tent'], 1, 'two-person'),
            (items['Sleeping bag'], 2, ''),
            (items['Gas canister'], 3, ''),
        ])
        ListShare.objects.get_or_create(list=camping, user=users['bob'])

        self._list('Birthday party', users['bob'], False, [
            (items['Croissant'], 12, ''),
            (items['Cheese'], 1, 'brie'),
        ])

        self.stdout.write('    Created 3 lists (one shared with everyone, one shared with bob)')

    def create_cards(self, users):
        self.stdout.write('  Creating discount cards...')

        cards = [
            (users['alice'], 'Corner Grocer', 'gold tier', True, '4601234567890'),
            (users['alice'], 'Pharmacy', '', True, 'PH-0042-17'),
            (users['bob'], 'Hardware Store', 'expired last year', False, 'HW-778812'),
        ]

        for owner, name, comment, is_active, value in cards:
            card, created = DiscountCard.objects.get_or_create(
                owner=owner,
                name=name,
                defaults={'comment': comment, 'is_active': is_active},
            )
            if created:
                CardIdentifier.objects.create(card=card, type=CardIdentifier.Type.MANUAL, value=value)

        self.stdout.write(f'    Created {len(cards)} cards')
