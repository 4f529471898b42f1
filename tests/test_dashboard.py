"""
Tests for the dashboard summary and the full walkthrough from ingredient to batch
"""
import pytest
from datetime import date
from django.urls import reverse

from batches.models import Batch
from dashboard.services import build_summary
from ingredients.models import Ingredient
from inventory.models import InventoryItem
from recipes.models import Recipe


@pytest.mark.django_db
class TestDashboardSummary:

    def test_counts_match_scoped_counts(self, ctx, user, other_user, make_ingredient, make_recipe, make_item, make_batch):
        shea = make_ingredient(user, "Shea Butter")
        make_ingredient(user, "Cocoa Butter")
        make_ingredient(user, "Jojoba Oil")
        recipe = make_recipe(user, ingredients=[shea])
        make_item(user, shea)
        make_item(user, shea, purchase_date=date(2026, 1, 10))
        make_batch(user, recipe)
        # Another account's records never leak into the numbers.
        theirs = make_ingredient(other_user, "Beeswax")
        make_item(other_user, theirs)
        make_batch(other_user, make_recipe(other_user, "Lip Balm", ingredients=[theirs]))

        summary = build_summary(ctx)

        assert summary["stats"] == {"ingredients": 3, "recipes": 1, "inventory": 2, "batches": 1}

    def test_empty_dashboard(self, auth_client):
        response = auth_client.get(reverse("dashboard:home"))

        assert response.status_code == 200
        assert response.context["stats"] == {"ingredients": 0, "recipes": 0, "inventory": 0, "batches": 0}
        assert b"No recipes yet" in response.content
        assert b"No batches logged yet" in response.content

    def test_recent_lists_limited_to_five(self, ctx, user, make_recipe, make_batch):
        recipes = [make_recipe(user, f"Recipe {n}") for n in range(7)]
        for day, recipe in enumerate(recipes, start=1):
            make_batch(user, recipe, made_on=date(2026, 1, day))

        summary = build_summary(ctx)

        assert len(summary["recent_recipes"]) == 5
        assert summary["recent_recipes"][0] == recipes[-1]
        assert [b.made_on.day for b in summary["recent_batches"]] == [7, 6, 5, 4, 3]

    def test_deleted_batch_leaves_recent_batches(self, auth_client, user, make_recipe, make_batch):
        batch = make_batch(user, make_recipe(user))

        auth_client.post(reverse("batches:delete", args=[batch.pk]))
        response = auth_client.get(reverse("dashboard:home"))

        assert response.context["stats"]["batches"] == 0
        assert response.context["recent_batches"] == []

    def test_requires_login(self, client):
        response = client.get(reverse("dashboard:home"))
        assert response.status_code == 302


@pytest.mark.django_db
@pytest.mark.integration
class TestBodyButterWalkthrough:
    """Ingredient -> inventory item -> recipe -> batch, all through the views"""

    def test_full_walkthrough(self, auth_client, user):
        auth_client.post(reverse("ingredients:list"), {"name": "Shea Butter", "category": "Butter"})
        shea = Ingredient.objects.get(user=user, name="Shea Butter")

        auth_client.post(reverse("inventory:list"), {
            "ingredient": shea.pk,
            "brand": "Better Shea Butter",
            "size": "16 oz",
            "purchase_date": "2026-01-26",
        })
        assert InventoryItem.objects.filter(user=user, ingredient=shea).count() == 1

        auth_client.post(reverse("recipes:list"), {
            "title": "Simple Body Butter",
            "description": "Whipped shea",
            "instructions": "Melt, cool, whip.",
            "lines-TOTAL_FORMS": "1",
            "lines-INITIAL_FORMS": "0",
            "lines-MIN_NUM_FORMS": "0",
            "lines-MAX_NUM_FORMS": "1000",
            "lines-0-ingredient": shea.pk,
            "lines-0-quantity": "1 cup",
        })
        recipe = Recipe.objects.get(user=user, title="Simple Body Butter")
        assert list(recipe.ingredients.all()) == [shea]

        auth_client.post(reverse("batches:list"), {"recipe": recipe.pk, "made_on": "2026-01-27"})
        assert Batch.objects.filter(user=user, recipe=recipe).count() == 1

        response = auth_client.get(reverse("dashboard:home"))

        assert response.context["stats"]["batches"] == 1
        content = response.content.decode()
        recent = content.split("Recent Batches", 1)[1]
        assert "Simple Body Butter" in recent
        assert "Jan 27" in recent
