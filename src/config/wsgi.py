"""WSGI entry point shared by the customer and shipment services.

``SERVICE_NAME`` decides which URL groups are mounted (see ``config.urls``).
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

application = get_wsgi_application()
