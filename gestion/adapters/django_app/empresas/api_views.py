"""
API Views JSON para los dominios de Empresas y Sedes.

Endpoints de Empresas:
- GET    /api/empresas                      - Listar (filtros: soloActivas, sector, facturacionMinima)
- POST   /api/empresas                      - Crear
- GET    /api/empresas/<id>                 - Obtener
- PUT    /api/empresas/<id>                 - Modificar
- DELETE /api/empresas/<id>                 - Eliminar (y sus sedes)
- GET    /api/empresas/activas              - Listar activas
- GET    /api/empresas/cif/<cif>            - Obtener por CIF
- GET    /api/empresas/sector/<sector>      - Listar por sector
- GET    /api/empresas/buscar?texto=        - Buscar por razón social
- PATCH  /api/empresas/<id>/desactivar      - Baja lógica
- PATCH  /api/empresas/<id>/activar         - Reactivar
- GET    /api/empresas/estadisticas/activas - Número de activas

Endpoints de Sedes:
- GET/POST        /api/sedes
- GET/PUT/DELETE  /api/sedes/<id>
- GET /api/sedes/empresa/<empresa_id>            (filtro: ciudad)
- GET /api/sedes/empresa/<empresa_id>/principal
- GET /api/sedes/empresa/<empresa_id>/count
- GET /api/sedes/ciudad/<ciudad>
- GET /api/sedes/provincia/<provincia>
- GET /api/sedes/buscar?texto=

Formato:
- Entrada: JSON con claves camelCase
- Salida: el DTO (o lista de DTOs) en JSON; los errores como
  {"error": código, "message": texto, ...}
"""

import json
import logging
from typing import Any, Dict

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from gestion.core.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from gestion.config.container import get_container

from .forms import EmpresaForm, SedeForm

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(data: Any, status: int = 200) -> JsonResponse:
    """
    Crea una respuesta JSON.

    Args:
        data: DTO serializado, lista de DTOs o valor simple
        status: Código HTTP
    """
    return JsonResponse(data, status=status, safe=False)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parsea el body JSON de la petición.

    Raises:
        ValidationError: Si el JSON no es válido
    """
    if not request.body:
        return {}

    try:
        return json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationError(f"JSON no válido: {e}")


def parse_float(request: HttpRequest, nombre: str):
    """Lee un parámetro numérico opcional de la query string."""
    valor = request.GET.get(nombre)
    if valor in (None, ''):
        return None
    try:
        return float(valor)
    except ValueError:
        raise ValidationError(f"El parámetro {nombre} debe ser numérico", field=nombre)


def required_param(request: HttpRequest, nombre: str) -> str:
    valor = request.GET.get(nombre)
    if valor is None:
        raise ValidationError(f"El parámetro {nombre} es obligatorio", field=nombre)
    return valor


def no_encontrado(entity_type: str, entity_id) -> EntityNotFoundError:
    return EntityNotFoundError(
        f"{entity_type} no encontrada: {entity_id}",
        entity_type=entity_type,
        entity_id=entity_id,
    )


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    Vista base para las APIs JSON.

    Proporciona:
    - Parsing del JSON de entrada
    - Acceso al contenedor de DI
    - Tratamiento uniforme de errores
    """

    def dispatch(self, request: HttpRequest, *args, **kwargs) -> HttpResponse:
        try:
            return super().dispatch(request, *args, **kwargs)
        except Exception as e:
            return self.handle_exception(e)

    def get_container(self):
        return get_container()

    def get_service(self, service_name: str):
        """Obtiene un service (Factory) del contenedor."""
        return getattr(self.get_container(), service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Traduce una excepción a respuesta HTTP.

        - ValidationError → 400
        - EntityNotFoundError → 404
        - Otra DomainException → 400
        - Cualquier otra → 500 (se registra la traza)
        """
        if isinstance(e, ValidationError):
            return json_response(e.to_dict(), status=400)

        if isinstance(e, EntityNotFoundError):
            return json_response(e.to_dict(), status=404)

        if isinstance(e, DomainException):
            return json_response(e.to_dict(), status=400)

        logger.exception(f"Unexpected API error: {e}")
        return json_response(
            {"error": "INTERNAL_ERROR", "message": "Error interno del servidor"},
            status=500,
        )


# =============================================================================
# Empresa API Views
# =============================================================================

class EmpresaListView(BaseAPIView):
    """
    GET /api/empresas - Lista empresas
    POST /api/empresas - Crea empresa
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Query params:
        - soloActivas: "true" para limitar a empresas activas
        - sector: Sector exacto
        - facturacionMinima: Facturación anual estrictamente mayor

        sector y soloActivas pueden ir juntos; facturacionMinima no se
        combina con ninguno de los dos (400 VALIDATION_ERROR).
        """
        empresas = self.get_service('listar_empresas_service').execute(
            solo_activas=request.GET.get('soloActivas', '').lower() == 'true',
            sector=request.GET.get('sector') or None,
            facturacion_minima=parse_float(request, 'facturacionMinima'),
        )
        return json_response([e.to_dict() for e in empresas])

    def post(self, request: HttpRequest) -> JsonResponse:
        dto = EmpresaForm(self.parse_body(request)).to_dto()
        empresa = self.get_service('crear_empresa_service').execute(dto)
        return json_response(empresa.to_dict(), status=201)


class EmpresaDetailView(BaseAPIView):
    """
    GET/PUT/DELETE /api/empresas/<id>
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        empresa = self.get_service('obtener_empresa_service').execute(pk)
        if empresa is None:
            raise no_encontrado('Empresa', pk)
        return json_response(empresa.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        dto = EmpresaForm(self.parse_body(request)).to_dto()
        empresa = self.get_service('actualizar_empresa_service').execute(pk, dto)
        return json_response(empresa.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('eliminar_empresa_service').execute(pk)
        return HttpResponse(status=204)


class EmpresaActivasView(BaseAPIView):
    """GET /api/empresas/activas"""

    def get(self, request: HttpRequest) -> JsonResponse:
        empresas = self.get_service('listar_empresas_service').execute(solo_activas=True)
        return json_response([e.to_dict() for e in empresas])


class EmpresaPorCifView(BaseAPIView):
    """GET /api/empresas/cif/<cif>"""

    def get(self, request: HttpRequest, cif: str) -> JsonResponse:
        empresa = self.get_service('obtener_empresa_por_cif_service').execute(cif)
        if empresa is None:
            raise no_encontrado('Empresa', cif)
        return json_response(empresa.to_dict())


class EmpresaPorSectorView(BaseAPIView):
    """GET /api/empresas/sector/<sector>"""

    def get(self, request: HttpRequest, sector: str) -> JsonResponse:
        empresas = self.get_service('listar_empresas_service').execute(sector=sector)
        return json_response([e.to_dict() for e in empresas])


class EmpresaBuscarView(BaseAPIView):
    """GET /api/empresas/buscar?texto="""

    def get(self, request: HttpRequest) -> JsonResponse:
        texto = required_param(request, 'texto')
        empresas = self.get_service('listar_empresas_service').execute(texto=texto)
        return json_response([e.to_dict() for e in empresas])


class EmpresaDesactivarView(BaseAPIView):
    """PATCH /api/empresas/<id>/desactivar"""

    def patch(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('desactivar_empresa_service').execute(pk)
        return HttpResponse(status=204)


class EmpresaActivarView(BaseAPIView):
    """PATCH /api/empresas/<id>/activar"""

    def patch(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('activar_empresa_service').execute(pk)
        return HttpResponse(status=204)


class EmpresaEstadisticasActivasView(BaseAPIView):
    """GET /api/empresas/estadisticas/activas - devuelve un número"""

    def get(self, request: HttpRequest) -> JsonResponse:
        return json_response(self.get_service('contar_empresas_activas_service').execute())


# =============================================================================
# Sede API Views
# =============================================================================

class SedeListView(BaseAPIView):
    """
    GET /api/sedes - Lista sedes (filtro: capacidadMinima)
    POST /api/sedes - Crea sede
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        sedes = self.get_service('listar_sedes_service').execute(
            capacidad_minima=parse_float(request, 'capacidadMinima'),
        )
        return json_response([s.to_dict() for s in sedes])

    def post(self, request: HttpRequest) -> JsonResponse:
        dto = SedeForm(self.parse_body(request), alta=True).to_dto()
        sede = self.get_service('crear_sede_service').execute(dto)
        return json_response(sede.to_dict(), status=201)


class SedeDetailView(BaseAPIView):
    """
    GET/PUT/DELETE /api/sedes/<id>
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        sede = self.get_service('obtener_sede_service').execute(pk)
        if sede is None:
            raise no_encontrado('Sede', pk)
        return json_response(sede.to_dict())

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        dto = SedeForm(self.parse_body(request), alta=False).to_dto()
        sede = self.get_service('actualizar_sede_service').execute(pk, dto)
        return json_response(sede.to_dict())

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        self.get_service('eliminar_sede_service').execute(pk)
        return HttpResponse(status=204)


class SedesPorEmpresaView(BaseAPIView):
    """GET /api/sedes/empresa/<empresa_id> (filtro opcional: ciudad)"""

    def get(self, request: HttpRequest, empresa_id: int) -> JsonResponse:
        sedes = self.get_service('listar_sedes_service').execute(
            empresa_id=empresa_id,
            ciudad=request.GET.get('ciudad') or None,
        )
        return json_response([s.to_dict() for s in sedes])


class SedePrincipalView(BaseAPIView):
    """GET /api/sedes/empresa/<empresa_id>/principal"""

    def get(self, request: HttpRequest, empresa_id: int) -> JsonResponse:
        sede = self.get_service('obtener_sede_principal_service').execute(empresa_id)
        if sede is None:
            raise EntityNotFoundError(
                f"La empresa {empresa_id} no tiene sede principal",
                entity_type='Sede',
            )
        return json_response(sede.to_dict())


class SedeCountView(BaseAPIView):
    """GET /api/sedes/empresa/<empresa_id>/count"""

    def get(self, request: HttpRequest, empresa_id: int) -> JsonResponse:
        return json_response(
            self.get_service('contar_sedes_por_empresa_service').execute(empresa_id)
        )


class SedePorCiudadView(BaseAPIView):
    """GET /api/sedes/ciudad/<ciudad>"""

    def get(self, request: HttpRequest, ciudad: str) -> JsonResponse:
        sedes = self.get_service('listar_sedes_service').execute(ciudad=ciudad)
        return json_response([s.to_dict() for s in sedes])


class SedePorProvinciaView(BaseAPIView):
    """GET /api/sedes/provincia/<provincia>"""

    def get(self, request: HttpRequest, provincia: str) -> JsonResponse:
        sedes = self.get_service('listar_sedes_service').execute(provincia=provincia)
        return json_response([s.to_dict() for s in sedes])


class SedeBuscarView(BaseAPIView):
    """GET /api/sedes/buscar?texto="""

    def get(self, request: HttpRequest) -> JsonResponse:
        texto = required_param(request, 'texto')
        sedes = self.get_service('listar_sedes_service').execute(texto=texto)
        return json_response([s.to_dict() for s in sedes])
