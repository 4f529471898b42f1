from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from ingredients.models import Ingredient


class InventoryItem(models.Model):
    """A concrete purchase of an ingredient sitting on the user's shelf."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='inventory_items')
    ingredient = models.ForeignKey(Ingredient, on_delete=models.RESTRICT, related_name='inventory_items')
    brand = models.CharField(max_length=200, blank=True)
    size = models.CharField(max_length=100, blank=True, help_text=_("e.g. 16 oz, 500 ml"))
    location = models.CharField(max_length=200, blank=True, help_text=_("Where it is stored"))
    purchase_date = models.DateField()
    notes = models.TextField(blank=True)
    photo = models.ImageField(upload_to='inventory_photos/%Y/%m/', blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Inventory item")
        verbose_name_plural = _("Inventory items")
        ordering = ['-purchase_date', '-created_at']

    def __str__(self):
        label = f"{self.brand} {self.ingredient.name}".strip()
        return f"{label} ({self.purchase_date})"

    def get_absolute_url(self):
        return reverse('inventory:detail', args=[self.pk])

    def clean(self):
        if self.user_id and self.ingredient_id and self.ingredient.user_id != self.user_id:
            raise ValidationError({'ingredient': _("Ingredient belongs to another account.")})
