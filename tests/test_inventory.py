"""
Tests for inventory items: owner scoping, required fields, photo upload
"""
import pytest
from datetime import date
from django.urls import reverse

from inventory.models import InventoryItem


@pytest.mark.django_db
class TestInventoryList:
    """Listing only ever shows the current user's purchases"""

    def test_list_shows_only_own_items(self, auth_client, user, other_user, make_ingredient, make_item):
        mine = make_item(user, make_ingredient(user, "Shea Butter"), brand="Mine Co")
        make_item(other_user, make_ingredient(other_user, "Cocoa Butter"), brand="Theirs Co")

        response = auth_client.get(reverse("inventory:list"))

        assert response.status_code == 200
        assert list(response.context["items"]) == [mine]
        assert b"Mine Co" in response.content
        assert b"Theirs Co" not in response.content

    def test_list_ordered_by_purchase_date_desc(self, auth_client, user, make_ingredient, make_item):
        shea = make_ingredient(user)
        older = make_item(user, shea, purchase_date=date(2025, 12, 1))
        newer = make_item(user, shea, purchase_date=date(2026, 1, 26))

        response = auth_client.get(reverse("inventory:list"))

        assert list(response.context["items"]) == [newer, older]

    def test_list_requires_login(self, client):
        response = client.get(reverse("inventory:list"))
        assert response.status_code == 302
        assert reverse("login") in response.url


@pytest.mark.django_db
class TestInventoryCreate:

    def test_create_item(self, auth_client, user, make_ingredient):
        shea = make_ingredient(user)

        response = auth_client.post(reverse("inventory:list"), {
            "ingredient": shea.pk,
            "brand": "Better Shea",
            "size": "16 oz",
            "location": "Pantry",
            "purchase_date": "2026-01-26",
            "notes": "Ivory, unrefined",
        })

        item = InventoryItem.objects.get()
        assert response.status_code == 302
        assert response.url == reverse("inventory:detail", args=[item.pk])
        assert item.user == user
        assert item.ingredient == shea
        assert item.purchase_date == date(2026, 1, 26)

    def test_missing_purchase_date_fails_and_stores_nothing(self, auth_client, user, make_ingredient):
        shea = make_ingredient(user)

        response = auth_client.post(reverse("inventory:list"), {
            "ingredient": shea.pk,
            "brand": "Better Shea",
            "purchase_date": "",
        })

        assert response.status_code == 200
        assert "purchase_date" in response.context["form"].errors
        assert InventoryItem.objects.count() == 0

    def test_missing_ingredient_fails(self, auth_client, user):
        response = auth_client.post(reverse("inventory:list"), {"purchase_date": "2026-01-26"})

        assert response.status_code == 200
        assert "ingredient" in response.context["form"].errors
        assert InventoryItem.objects.count() == 0

    def test_other_users_ingredient_is_rejected(self, auth_client, other_user, make_ingredient):
        theirs = make_ingredient(other_user, "Cocoa Butter")

        response = auth_client.post(reverse("inventory:list"), {
            "ingredient": theirs.pk,
            "purchase_date": "2026-01-26",
        })

        assert response.status_code == 200
        assert "ingredient" in response.context["form"].errors
        assert InventoryItem.objects.count() == 0

    def test_create_with_photo(self, auth_client, user, make_ingredient, photo):
        shea = make_ingredient(user)

        auth_client.post(reverse("inventory:list"), {
            "ingredient": shea.pk,
            "purchase_date": "2026-01-26",
            "photo": photo,
        })

        item = InventoryItem.objects.get()
        assert item.photo.name.startswith("inventory_photos/")

    def test_new_form_only_offers_own_ingredients(self, auth_client, user, other_user, make_ingredient):
        mine = make_ingredient(user, "Shea Butter")
        make_ingredient(other_user, "Cocoa Butter")

        response = auth_client.get(reverse("inventory:new"))

        choices = list(response.context["form"].fields["ingredient"].queryset)
        assert choices == [mine]


@pytest.mark.django_db
class TestInventoryDetailEditDelete:
    """Cross-user access behaves as not-found and returns to the list"""

    def test_detail(self, auth_client, user, make_ingredient, make_item):
        item = make_item(user, make_ingredient(user), brand="Better Shea")

        response = auth_client.get(reverse("inventory:detail", args=[item.pk]))

        assert response.status_code == 200
        assert response.context["item"] == item

    def test_other_users_item_redirects_to_list(self, auth_client, other_user, make_ingredient, make_item):
        theirs = make_item(other_user, make_ingredient(other_user))

        response = auth_client.get(reverse("inventory:detail", args=[theirs.pk]), follow=True)

        assert response.redirect_chain[-1][0] == reverse("inventory:list")
        assert b"could not be found" in response.content

    def test_missing_item_redirects_to_list(self, auth_client):
        response = auth_client.get(reverse("inventory:detail", args=[9999]))

        assert response.status_code == 302
        assert response.url == reverse("inventory:list")

    def test_edit(self, auth_client, user, make_ingredient, make_item):
        shea = make_ingredient(user)
        item = make_item(user, shea, location="Pantry")

        response = auth_client.post(reverse("inventory:edit", args=[item.pk]), {
            "ingredient": shea.pk,
            "location": "Fridge",
            "purchase_date": "2026-01-26",
        })

        item.refresh_from_db()
        assert response.status_code == 302
        assert item.location == "Fridge"

    def test_edit_other_users_item_is_denied(self, auth_client, other_user, make_ingredient, make_item):
        cocoa = make_ingredient(other_user, "Cocoa Butter")
        theirs = make_item(other_user, cocoa, location="Closet")

        response = auth_client.post(reverse("inventory:edit", args=[theirs.pk]), {
            "ingredient": cocoa.pk,
            "location": "Stolen",
            "purchase_date": "2026-01-26",
        })

        theirs.refresh_from_db()
        assert response.status_code == 302
        assert response.url == reverse("inventory:list")
        assert theirs.location == "Closet"

    def test_delete_confirmation_then_delete(self, auth_client, user, make_ingredient, make_item):
        item = make_item(user, make_ingredient(user))

        confirm = auth_client.get(reverse("inventory:delete", args=[item.pk]))
        response = auth_client.post(reverse("inventory:delete", args=[item.pk]))

        assert confirm.status_code == 200
        assert response.status_code == 302
        assert not InventoryItem.objects.filter(pk=item.pk).exists()

    def test_delete_other_users_item_is_denied(self, auth_client, other_user, make_ingredient, make_item):
        theirs = make_item(other_user, make_ingredient(other_user))

        auth_client.post(reverse("inventory:delete", args=[theirs.pk]))

        assert InventoryItem.objects.filter(pk=theirs.pk).exists()
