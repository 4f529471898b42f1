from django import forms
from django.forms import inlineformset_factory

from ingredients.models import Ingredient
from .models import Recipe, RecipeIngredient


class RecipeForm(forms.ModelForm):
    class Meta:
        model = Recipe
        fields = ['title', 'description', 'instructions']
        widgets = {
            'title': forms.TextInput(attrs={'placeholder': 'Recipe title'}),
            'description': forms.Textarea(attrs={'rows': 2}),
            'instructions': forms.Textarea(attrs={'rows': 6}),
        }


class RecipeIngredientForm(forms.ModelForm):
    """One ingredient line. Only the owner's ingredients are offered."""

    def __init__(self, *args, owner_id=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['ingredient'].queryset = Ingredient.objects.filter(user_id=owner_id).order_by('name')

    class Meta:
        model = RecipeIngredient
        fields = ['ingredient', 'quantity']
        widgets = {
            'quantity': forms.TextInput(attrs={'placeholder': '1/2 cup'}),
        }


RecipeIngredientFormSet = inlineformset_factory(
    Recipe,
    RecipeIngredient,
    form=RecipeIngredientForm,
    extra=3,
    can_delete=True,
)


def recipe_lines_formset(ctx, data=None, instance=None):
    return RecipeIngredientFormSet(
        data,
        instance=instance if instance is not None else Recipe(),
        prefix="lines",
        form_kwargs={"owner_id": ctx.owner_id},
    )
