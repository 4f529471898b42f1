from django import forms

from recipes.models import Recipe
from .models import Batch


class BatchForm(forms.ModelForm):
    """Log-a-batch form. Only the owner's recipes are valid choices."""

    def __init__(self, *args, owner_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['recipe'].queryset = Recipe.objects.filter(user_id=owner_id).order_by('title')
        self.fields["recipe"].empty_label = "Choose a recipe"

    class Meta:
        model = Batch
        fields = ['recipe', 'made_on', 'notes']
        labels = {
            'made_on': 'Made on',
        }
        widgets = {
            'made_on': forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
            'notes': forms.Textarea(attrs={'rows': 3, 'placeholder': 'Scent, texture, yield...'}),
        }
