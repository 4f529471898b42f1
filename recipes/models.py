from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from ingredients.models import Ingredient


class Recipe(models.Model):
    """Template data: a formulation the user can make batches of."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='recipes')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    instructions = models.TextField(blank=True)
    ingredients = models.ManyToManyField(Ingredient, through='RecipeIngredient', related_name='recipes')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Recipe")
        verbose_name_plural = _("Recipes")
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def get_absolute_url(self):
        return reverse('recipes:detail', args=[self.pk])


class RecipeIngredient(models.Model):
    recipe = models.ForeignKey(Recipe, on_delete=models.CASCADE, related_name='recipe_ingredients')
    # RESTRICT: a referenced ingredient can't be deleted alone, but the owner's cascade still works.
    ingredient = models.ForeignKey(Ingredient, on_delete=models.RESTRICT, related_name='recipe_lines')
    quantity = models.CharField(max_length=100, blank=True, help_text=_("e.g. 1/2 cup, 30 g"))

    class Meta:
        verbose_name = _("Recipe ingredient")
        verbose_name_plural = _("Recipe ingredients")
        unique_together = ('recipe', 'ingredient')
        ordering = ['id']

    def __str__(self):
        return f"{self.quantity} {self.ingredient.name}".strip()

    def clean(self):
        if self.recipe_id and self.ingredient_id and self.recipe.user_id != self.ingredient.user_id:
            raise ValidationError({'ingredient': _("Ingredient belongs to another account.")})
