"""
Adapter Django de los dominios de Empresas y Sedes.

Contiene los models, mappers, repositorios, forms y vistas JSON
que conectan el Core con Django.
"""
