from django.urls import path
from . import views

app_name = "batches"

# No edit/update route: batches are logged once and only deleted.
urlpatterns = [
    path("", views.batch_list, name="list"),
    path("new/", views.batch_new, name="new"),
    path("<int:pk>/", views.batch_detail, name="detail"),
    path("<int:pk>/delete/", views.batch_delete, name="delete"),
]
