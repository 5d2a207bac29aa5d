import os

import django

# Standalone Django environment for the endpoint tests
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
# Several TestClients resolve the same NinjaAPI urls
os.environ.setdefault("NINJA_SKIP_REGISTRY", "yes")
django.setup()
