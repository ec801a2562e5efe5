"""Adapter Django: persistencia con el ORM y API HTTP JSON."""
