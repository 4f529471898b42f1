from django import forms

from ingredients.models import Ingredient
from .models import InventoryItem


class InventoryItemForm(forms.ModelForm):
    """Purchase form. The ingredient selector only lists the owner's ingredients."""

    def __init__(self, *args, owner_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['ingredient'].queryset = Ingredient.objects.filter(user_id=owner_id).order_by('name')
        self.fields['ingredient'].empty_label = "Choose an ingredient"

    class Meta:
        model = InventoryItem
        fields = ['ingredient', 'brand', 'size', 'location', 'purchase_date', 'notes', 'photo']
        widgets = {
            'ingredient': forms.Select(),
            'brand': forms.TextInput(attrs={'placeholder': 'Brand'}),
            'size': forms.TextInput(attrs={'placeholder': '16 oz'}),
            'location': forms.TextInput(attrs={'placeholder': 'Pantry shelf 2'}),
            'purchase_date': forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
            'notes': forms.Textarea(attrs={'rows': 3}),
        }
