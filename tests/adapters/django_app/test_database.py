"""
Tests de la configuración de base de datos.

Coverage:
- DatabaseConfig.from_url(): SQLite y PostgreSQL
- DatabaseConfig.from_env(): prioridad de variables de entorno
- DatabaseConfig.to_django_config()
- check_database_connection()
- LOWER Unicode en las conexiones SQLite
"""

import pytest
from django.db import connection

from gestion.adapters.django_app.shared.database import (
    DatabaseConfig,
    check_database_connection,
)


@pytest.fixture
def entorno_limpio(monkeypatch):
    for nombre in ('DATABASE_URL', 'DATABASE_HOST', 'DATABASE_NAME',
                   'DATABASE_USER', 'DATABASE_PASSWORD', 'DATABASE_PORT'):
        monkeypatch.delenv(nombre, raising=False)
    return monkeypatch


class TestDatabaseConfig:

    def test_from_url_sqlite(self):
        config = DatabaseConfig.from_url('sqlite:///db.sqlite3')

        assert config.engine == 'sqlite'
        assert config.name == 'db.sqlite3'

    def test_from_url_sqlite_memoria(self):
        assert DatabaseConfig.from_url('sqlite:///:memory:').name == ':memory:'

    @pytest.mark.parametrize('esquema', ['postgresql', 'postgres'])
    def test_from_url_postgresql(self, esquema):
        config = DatabaseConfig.from_url(f'{esquema}://gestion:secreto@db.local:5433/empresas')

        assert config.engine == 'postgresql'
        assert config.user == 'gestion'
        assert config.password == 'secreto'
        assert config.host == 'db.local'
        assert config.port == 5433
        assert config.name == 'empresas'

    def test_from_url_invalida(self):
        with pytest.raises(ValueError):
            DatabaseConfig.from_url('mysql://localhost/db')

    def test_from_env_prioriza_database_url(self, entorno_limpio):
        entorno_limpio.setenv('DATABASE_URL', 'sqlite:///otra.sqlite3')
        entorno_limpio.setenv('DATABASE_HOST', 'db.local')

        assert DatabaseConfig.from_env().name == 'otra.sqlite3'

    def test_from_env_por_piezas(self, entorno_limpio):
        entorno_limpio.setenv('DATABASE_HOST', 'db.local')
        entorno_limpio.setenv('DATABASE_NAME', 'empresas')

        config = DatabaseConfig.from_env()

        assert config.engine == 'postgresql'
        assert config.host == 'db.local'
        assert config.name == 'empresas'
        assert config.port == 5432

    def test_from_env_sqlite_por_defecto(self, entorno_limpio, tmp_path):
        config = DatabaseConfig.from_env(default_sqlite_path=tmp_path / 'db.sqlite3')

        assert config.engine == 'sqlite'
        assert config.name == str(tmp_path / 'db.sqlite3')

    def test_to_django_config_sqlite(self):
        assert DatabaseConfig(name='db.sqlite3').to_django_config() == {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': 'db.sqlite3',
        }

    def test_to_django_config_postgresql(self):
        config = DatabaseConfig.from_url('postgresql://u:p@h:5432/d').to_django_config()

        assert config['ENGINE'] == 'django.db.backends.postgresql'
        assert config['PORT'] == '5432'
        assert config['OPTIONS'] == {'connect_timeout': 10}


@pytest.mark.django_db
def test_check_database_connection():
    resultado = check_database_connection()

    assert resultado['healthy'] is True
    assert resultado['vendor'] == 'sqlite'


@pytest.mark.django_db
class TestLowerUnicode:

    def _lower(self, valor):
        with connection.cursor() as cursor:
            cursor.execute('SELECT LOWER(%s)', [valor])
            return cursor.fetchone()[0]

    def test_convierte_acentos_y_enes(self):
        assert self._lower('ÑANDÚ MÁLAGA') == 'ñandú málaga'

    def test_null_sigue_siendo_null(self):
        assert self._lower(None) is None
