"""
WSGI config for tuition_server project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tuition_server.settings.base')

application = get_wsgi_application()
