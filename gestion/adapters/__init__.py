"""
Adapters Layer - Implementaciones concretas de los Ports del Core.

- django_app: persistencia con el ORM de Django y API HTTP JSON
"""
