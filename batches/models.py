from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.urls import reverse
from django.utils.translation import gettext_lazy as _

from recipes.models import Recipe


class ImmutableBatchError(ValueError):
    """Raised when something tries to re-save a batch that is already logged."""


class Batch(models.Model):
    """
    Records a production event: the user made `recipe` on `made_on`.

    A batch is a log entry, not a document. It has two transitions only:
      - create: `save()` on a new instance
      - delete: `delete()`
    Saving an existing batch raises ImmutableBatchError. To fix a mistake,
    delete the batch and log it again.
    """
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='batches')
    recipe = models.ForeignKey(Recipe, on_delete=models.RESTRICT, related_name='batches')
    made_on = models.DateField()
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Batch")
        verbose_name_plural = _("Batches")
        ordering = ['-made_on', '-created_at']

    def __str__(self):
        return f"{self.recipe.title} ({self.made_on})"

    def get_absolute_url(self):
        return reverse('batches:detail', args=[self.pk])

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableBatchError("Cannot edit a logged batch. Delete it and log it again.")
        super().save(*args, **kwargs)

    def clean(self):
        if self.user_id and self.recipe_id and self.recipe.user_id != self.user_id:
            raise ValidationError({'recipe': _("Recipe belongs to another account.")})
