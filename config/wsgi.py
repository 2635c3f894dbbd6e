# config/wsgi.py

import os
from django.core.wsgi import get_wsgi_application

# HTTP síncrono apenas; o WebSocket do quadro exige o ASGI (config/asgi.py)
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.production')

application = get_wsgi_application()
