from django.conf import settings
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _


class Ingredient(models.Model):
    """Template data: a raw material the user works with, e.g. shea butter or beeswax."""
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='ingredients')
    name = models.CharField(max_length=200)
    category = models.CharField(max_length=100, blank=True, help_text=_("e.g. Butter, Oil, Wax, Essential oil"))
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Ingredient")
        verbose_name_plural = _("Ingredients")
        ordering = ['name']

    def __str__(self):
        return self.name

    def get_absolute_url(self):
        return reverse('ingredients:detail', args=[self.pk])
