"""
Management command to load the body-butter walkthrough data for a user.
"""
from datetime import date
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.contrib.auth import get_user_model

from batches.models import Batch
from ingredients.models import Ingredient
from inventory.models import InventoryItem
from recipes.models import Recipe, RecipeIngredient

User = get_user_model()


class Command(BaseCommand):
    help = 'Create sample ingredient, inventory item, recipe and batch for an existing user'

    def add_arguments(self, parser):
        parser.add_argument(
            'email',
            type=str,
            help='Email of the account to seed',
        )

    def handle(self, *args, **options):
        email = options['email']

        try:
            user = User.objects.get(email=email)
        except User.DoesNotExist:
            raise CommandError(f'User "{email}" does not exist')

        with transaction.atomic():
            shea, created = Ingredient.objects.get_or_create(
                user=user,
                name='Shea Butter',
                defaults={'category': 'Butter', 'description': 'Unrefined, ivory colored.'},
            )
            self._report('Ingredient', shea, created)

            item, created = InventoryItem.objects.get_or_create(
                user=user,
                ingredient=shea,
                purchase_date=date(2026, 1, 26),
                defaults={'brand': 'Better Shea Butter', 'size': '16 oz', 'location': 'Pantry shelf'},
            )
            self._report('Inventory item', item, created)

            recipe, created = Recipe.objects.get_or_create(
                user=user,
                title='Simple Body Butter',
                defaults={
                    'description': 'Whipped shea body butter.',
                    'instructions': 'Melt, cool until opaque, whip until fluffy.',
                },
            )
            RecipeIngredient.objects.get_or_create(recipe=recipe, ingredient=shea, defaults={'quantity': '1 cup'})
            self._report('Recipe', recipe, created)

            batch, created = Batch.objects.get_or_create(user=user, recipe=recipe, made_on=date(2026, 1, 27))
            self._report('Batch', batch, created)

        self.stdout.write(self.style.SUCCESS(f'\nWorkshop seeded for {email}'))

    def _report(self, label, obj, created):
        if created:
            self.stdout.write(self.style.SUCCESS(f'✓ Created {label}: {obj}'))
        else:
            self.stdout.write(f'  Skipping {label} {obj} - already exists')
