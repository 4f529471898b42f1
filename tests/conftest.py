import io
from datetime import date

import pytest
from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image

from batches.models import Batch
from ingredients.models import Ingredient
from inventory.models import InventoryItem
from recipes.models import Recipe, RecipeIngredient
from users.context import OwnerContext

User = get_user_model()

PASSWORD = "lavender-Tin-4821"


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    """Keep uploaded photos out of the project tree."""
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings.MEDIA_ROOT


@pytest.fixture
def user(db):
    return User.objects.create_user(username="maker", email="maker@example.com", password=PASSWORD)


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username="neighbor", email="neighbor@example.com", password=PASSWORD)


@pytest.fixture
def ctx(user):
    return OwnerContext(user=user)


@pytest.fixture
def other_ctx(other_user):
    return OwnerContext(user=other_user)


@pytest.fixture
def auth_client(client, user):
    """Django test client logged in as `user`."""
    client.force_login(user)
    return client


@pytest.fixture
def make_ingredient():
    def _make(owner, name="Shea Butter", **kwargs):
        return Ingredient.objects.create(user=owner, name=name, **kwargs)
    return _make


@pytest.fixture
def make_recipe():
    def _make(owner, title="Simple Body Butter", ingredients=(), **kwargs):
        recipe = Recipe.objects.create(user=owner, title=title, **kwargs)
        for ingredient in ingredients:
            RecipeIngredient.objects.create(recipe=recipe, ingredient=ingredient, quantity="1 cup")
        return recipe
    return _make


@pytest.fixture
def make_item():
    def _make(owner, ingredient, purchase_date=date(2026, 1, 26), **kwargs):
        return InventoryItem.objects.create(
            user=owner, ingredient=ingredient, purchase_date=purchase_date, **kwargs
        )
    return _make


@pytest.fixture
def make_batch():
    def _make(owner, recipe, made_on=date(2026, 1, 27), **kwargs):
        return Batch.objects.create(user=owner, recipe=recipe, made_on=made_on, **kwargs)
    return _make


@pytest.fixture
def photo():
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=(240, 220, 180)).save(buffer, format="PNG")
    return SimpleUploadedFile("tub.png", buffer.getvalue(), content_type="image/png")


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def superuser_client(client, db):
    """Django test client logged in as a staff superuser."""
    admin = User.objects.create_superuser(username="admin", email="admin@example.com", password=PASSWORD)
    client.force_login(admin)
    return client


@pytest.fixture
def plain_static_storage(settings):
    """Admin pages use {% static %}; skip the manifest lookup."""
    settings.STORAGES = {
        **settings.STORAGES,
        "staticfiles": {"BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"},
    }
