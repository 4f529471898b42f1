from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('users/', include('users.urls')),
    path('', include('dashboard.urls', namespace='dashboard')),
    path('ingredients/', include('ingredients.urls', namespace='ingredients')),
    path('recipes/', include('recipes.urls', namespace='recipes')),
    path('inventory_items/', include('inventory.urls', namespace='inventory')),
    path('batches/', include('batches.urls', namespace='batches')),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
