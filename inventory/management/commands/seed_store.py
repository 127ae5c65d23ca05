from decimal import Decimal

from django.core.management.base import BaseCommand

from inventory.models import Category, Product
from inventory.services import CategoryStore, ProductStore, resolve_or_create_category

SAMPLE_CATEGORIES = [
    ('Whiskey', 'Various types of whiskey'),
    ('Vodka', 'Premium and standard vodkas'),
    ('Rum', 'White, dark, and spiced rums'),
    ('Gin', 'London dry and flavored gins'),
    ('Tequila', 'Blanco, reposado, and añejo tequilas'),
]

SAMPLE_PRODUCTS = [
    ("Jack Daniel's", Decimal('29.99'), 10, 'Whiskey'),
    ('Absolut Vodka', Decimal('24.99'), 15, 'Vodka'),
    ('Bacardi Superior', Decimal('19.99'), 20, 'Rum'),
    ('Bombay Sapphire', Decimal('27.99'), 12, 'Gin'),
    ('Patrón Silver', Decimal('49.99'), 8, 'Tequila'),
]


class Command(BaseCommand):
    help = 'Clears products and categories and loads the sample catalogue. Receipts are kept.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--no-clear',
            action='store_true',
            help='Keep existing products and categories and only add the samples.',
        )

    def handle(self, *args, **options):
        if not options['no_clear']:
            self.stdout.write(self.style.WARNING('Clearing products and categories...'))
            deleted_products, _ = Product.objects.all().delete()
            deleted_categories, _ = Category.objects.all().delete()
            self.stdout.write(
                f'- Deleted {deleted_products} product(s) and {deleted_categories} category(ies)'
            )

        categories = CategoryStore()
        products = ProductStore()

        by_name = {}
        for name, description in SAMPLE_CATEGORIES:
            category, created = resolve_or_create_category(name, categories)
            if created:
                category = categories.update(category.pk, description=description)
                self.stdout.write(self.style.SUCCESS(f'✓ Created category: {name}'))
            else:
                self.stdout.write(f'- Category exists: {name}')
            by_name[name] = category

        existing = {(p.name, p.category_id) for p in products.list()}
        for name, price, quantity, category_name in SAMPLE_PRODUCTS:
            category = by_name[category_name]
            if (name, category.pk) in existing:
                self.stdout.write(f'- Product exists: {name}')
                continue
            products.create(name=name, price=price, quantity=quantity, category=category)
            self.stdout.write(self.style.SUCCESS(f'✓ Created product: {name}'))

        self.stdout.write(self.style.SUCCESS('\nStore seeded successfully!'))
