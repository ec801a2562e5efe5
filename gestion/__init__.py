"""
Gestión de Empresas y Sedes - backend CRUD con Django.

Paquetes:
- core: Lógica de negocio (entidades, DTOs, ports, use cases)
- adapters: Implementaciones Django (ORM, API JSON)
- config: Settings, URLs y contenedor de DI
"""
