"""
WSGI config for workshop_project project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'workshop_project.settings')

application = get_wsgi_application()
