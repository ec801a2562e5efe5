"""
URL patterns de los dominios de Empresas y Sedes.

Las rutas no llevan barra final (/api/empresas, /api/sedes/1).
Las rutas fijas se declaran antes que las que capturan parámetros.
"""

from django.urls import path

from . import api_views

app_name = 'empresas'

urlpatterns = [
    # =========================================================================
    # Empresas
    # =========================================================================

    path('api/empresas', api_views.EmpresaListView.as_view(), name='empresa_list'),
    path('api/empresas/activas', api_views.EmpresaActivasView.as_view(), name='empresa_activas'),
    path('api/empresas/buscar', api_views.EmpresaBuscarView.as_view(), name='empresa_buscar'),
    path(
        'api/empresas/estadisticas/activas',
        api_views.EmpresaEstadisticasActivasView.as_view(),
        name='empresa_estadisticas_activas',
    ),
    path('api/empresas/cif/<str:cif>', api_views.EmpresaPorCifView.as_view(), name='empresa_cif'),
    path(
        'api/empresas/sector/<str:sector>',
        api_views.EmpresaPorSectorView.as_view(),
        name='empresa_sector',
    ),
    path('api/empresas/<int:pk>', api_views.EmpresaDetailView.as_view(), name='empresa_detail'),

    # Baja lógica / reactivación
    path(
        'api/empresas/<int:pk>/desactivar',
        api_views.EmpresaDesactivarView.as_view(),
        name='empresa_desactivar',
    ),
    path(
        'api/empresas/<int:pk>/activar',
        api_views.EmpresaActivarView.as_view(),
        name='empresa_activar',
    ),

    # =========================================================================
    # Sedes
    # =========================================================================

    path('api/sedes', api_views.SedeListView.as_view(), name='sede_list'),
    path('api/sedes/buscar', api_views.SedeBuscarView.as_view(), name='sede_buscar'),
    path('api/sedes/ciudad/<str:ciudad>', api_views.SedePorCiudadView.as_view(), name='sede_ciudad'),
    path(
        'api/sedes/provincia/<str:provincia>',
        api_views.SedePorProvinciaView.as_view(),
        name='sede_provincia',
    ),
    path(
        'api/sedes/empresa/<int:empresa_id>',
        api_views.SedesPorEmpresaView.as_view(),
        name='sede_por_empresa',
    ),
    path(
        'api/sedes/empresa/<int:empresa_id>/principal',
        api_views.SedePrincipalView.as_view(),
        name='sede_principal',
    ),
    path(
        'api/sedes/empresa/<int:empresa_id>/count',
        api_views.SedeCountView.as_view(),
        name='sede_count',
    ),
    path('api/sedes/<int:pk>', api_views.SedeDetailView.as_view(), name='sede_detail'),
]
