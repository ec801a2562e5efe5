#!/usr/bin/env python
"""
Setup rápido para desarrollo local.

Este script:
1. Configura los settings de Django
2. Crea la base de datos SQLite
3. Ejecuta las migraciones
4. Crea datos de ejemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
    python scripts/quick_setup.py --check-only
"""

import os
import sys
import argparse

# Añadir la raíz del proyecto al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


SAMPLE_DATA = [
    {
        'empresa': {
            'razon_social': 'Acme Logística SA',
            'cif': 'A28000001',
            'email': 'info@acme-logistica.es',
            'sector': 'Logística',
            'facturacion_anual': 12500000.0,
            'numero_empleados': 240,
        },
        'sedes': [
            {
                'nombre': 'Central Madrid',
                'direccion': 'Calle de Alcalá 100',
                'ciudad': 'Madrid',
                'provincia': 'Madrid',
                'codigo_postal': '28009',
                'es_principal': True,
                'capacidad_almacenamiento': 5000.0,
                'horario_recepcion': 'L-V 8:00-15:00',
            },
            {
                'nombre': 'Almacén Getafe',
                'direccion': 'Polígono Los Olivos, nave 12',
                'ciudad': 'Getafe',
                'provincia': 'Madrid',
                'capacidad_almacenamiento': 12000.0,
            },
        ],
    },
    {
        'empresa': {
            'razon_social': 'Distribuciones Levante SL',
            'cif': 'B46000002',
            'sector': 'Distribución',
            'facturacion_anual': 3200000.0,
            'numero_empleados': 45,
        },
        'sedes': [
            {
                'nombre': 'Oficinas Valencia',
                'direccion': 'Avenida del Puerto 25',
                'ciudad': 'Valencia',
                'provincia': 'Valencia',
                'es_principal': True,
            },
        ],
    },
]


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'gestion.config.settings')

    # Forzar SQLite para desarrollo rápido
    os.environ.setdefault('DATABASE_URL', 'sqlite:///db.sqlite3')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("Ejecutando migraciones...")
    call_command('migrate', verbosity=1)
    print("Migraciones completadas")


def create_sample_data():
    """Crea empresas y sedes de ejemplo a través de los use cases."""
    from gestion.config.container import get_container
    from gestion.core.empresas.dtos import EmpresaDTO
    from gestion.core.sedes.dtos import SedeDTO
    from gestion.core.shared.exceptions import ValidationError

    container = get_container()

    print("Creando datos de ejemplo...")

    for datos in SAMPLE_DATA:
        try:
            empresa = container.crear_empresa_service().execute(EmpresaDTO(**datos['empresa']))
        except ValidationError as e:
            print(f"   - {datos['empresa']['razon_social']}: {e.message}")
            continue

        print(f"   + {empresa.razon_social} (id={empresa.id})")
        for sede in datos['sedes']:
            creada = container.crear_sede_service().execute(
                SedeDTO(empresa_id=empresa.id, **sede)
            )
            print(f"      + {creada.nombre}")


def check_connection() -> bool:
    from gestion.adapters.django_app.shared.database import check_database_connection

    print("Comprobando la conexión con la base de datos...")
    resultado = check_database_connection()
    if resultado['healthy']:
        print(f"Conexión OK ({resultado['vendor']})")
    else:
        print(f"Error de conexión: {resultado['error']}")
    return resultado['healthy']


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("Información del setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\nSiguientes pasos:")
    print("   1. django-admin runserver --settings=gestion.config.settings --pythonpath=.")
    print("   2. Abrir: http://localhost:8000/api/empresas")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desarrollo')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Crear datos de ejemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Solo comprobar la conexión'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("Gestión de Empresas - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\nAsegúrate de que la base de datos está disponible.")
        print("   Para usar SQLite, define: DATABASE_URL=sqlite:///db.sqlite3")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
