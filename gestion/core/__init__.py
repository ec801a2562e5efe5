"""
Core Domain Layer - El Hexágono.

Este paquete contiene la lógica de negocio pura, sin dependencias de frameworks.
Características:
- Cero dependencias externas (Django, etc.)
- Testeable sin base de datos
- Agnóstico a la infraestructura
"""
