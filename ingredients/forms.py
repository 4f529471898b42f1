from django import forms
from .models import Ingredient


class IngredientForm(forms.ModelForm):
    class Meta:
        model = Ingredient
        fields = ['name', 'category', 'description']
        widgets = {
            'name': forms.TextInput(attrs={'placeholder': 'Ingredient name'}),
            'category': forms.TextInput(attrs={'placeholder': 'Butter, Oil, Wax...'}),
            'description': forms.Textarea(attrs={'rows': 3}),
        }
