"""
``runserver`` that listens on ``settings.PORT`` unless an address is given.
"""
from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import Command as StaticRunserverCommand


class Command(StaticRunserverCommand):
    default_port = str(settings.PORT)
