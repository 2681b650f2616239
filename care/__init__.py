"""Home-care booking application.

This package contains models, serializers, services, views and route
registrations for accounts, the four booking resources and the provider
guidance queue.
"""
