"""
Fixtures para los tests de la capa Django.

Este archivo proporciona:
- Factories de models (EmpresaModel, SedeModel)
- Un cliente JSON para la API
"""

import json
from datetime import date

import pytest


@pytest.fixture
def empresa_model_factory(db):
    """Factory para crear EmpresaModel en tests."""
    from gestion.adapters.django_app.empresas.models import EmpresaModel

    contador = {'n': 0}

    def crear(**kwargs):
        contador['n'] += 1
        defaults = {
            'razon_social': f"Empresa {contador['n']} SA",
            'cif': f"B{contador['n']:08d}",
            'sector': 'Logística',
            'fecha_alta': date(2020, 1, 15),
        }
        defaults.update(kwargs)
        return EmpresaModel.objects.create(**defaults)

    return crear


@pytest.fixture
def sede_model_factory(db):
    """Factory para crear SedeModel en tests."""
    from gestion.adapters.django_app.empresas.models import SedeModel

    def crear(empresa, **kwargs):
        defaults = {
            'nombre': 'HQ',
            'direccion': 'Calle Mayor 1',
            'ciudad': 'Madrid',
            'provincia': 'Madrid',
        }
        defaults.update(kwargs)
        return SedeModel.objects.create(empresa=empresa, **defaults)

    return crear


class JSONClient:
    """Envuelve el Client de Django enviando y leyendo JSON."""

    def __init__(self, client):
        self._client = client

    def _enviar(self, metodo, url, data=None):
        kwargs = {}
        if data is not None:
            kwargs['data'] = data if isinstance(data, (str, bytes)) else json.dumps(data)
            kwargs['content_type'] = 'application/json'
        return getattr(self._client, metodo)(url, **kwargs)

    def get(self, url, params=None):
        return self._client.get(url, params or {})

    def post(self, url, data=None):
        return self._enviar('post', url, data)

    def put(self, url, data=None):
        return self._enviar('put', url, data)

    def patch(self, url, data=None):
        return self._enviar('patch', url, data)

    def delete(self, url):
        return self._client.delete(url)


@pytest.fixture
def api(client, db):
    """Cliente JSON sobre la base de datos de test."""
    return JSONClient(client)
