"""
WSGI config for licorera project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'licorera.settings')

application = get_wsgi_application()
