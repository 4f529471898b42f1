from django.urls import path
from . import views

app_name = "ingredients"

urlpatterns = [
    path("", views.ingredient_list, name="list"),
    path("new/", views.ingredient_new, name="new"),
    path("<int:pk>/", views.ingredient_detail, name="detail"),
    path("<int:pk>/edit/", views.ingredient_edit, name="edit"),
    path("<int:pk>/delete/", views.ingredient_delete, name="delete"),
]
