"""
Configuración del proyecto Gestión de Empresas.

Módulos:
- settings: Configuración Django
- urls: Rutas principales
- wsgi: Aplicación WSGI
- container: Contenedor de Dependency Injection
"""
