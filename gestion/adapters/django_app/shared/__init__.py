"""Componentes Django compartidos: repositorio base, Unit of Work y base de datos."""
