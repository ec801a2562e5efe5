"""
Django Models para los dominios de Empresas y Sedes.

Estos models son ADAPTERS: implementan la persistencia de las entidades
definidas en gestion/core/empresas/entities.py y
gestion/core/sedes/entities.py.

IMPORTANTE:
- Los models NO contienen lógica de negocio
- Se convierten a/desde Entities mediante Mappers

Relaciones:
- EmpresaModel 1 ── N SedeModel (ON DELETE CASCADE)

Restricciones de base de datos:
- cif único
- como máximo una sede con es_principal=True por empresa
"""

from django.db import models
from django.db.models import Q


class EmpresaModel(models.Model):
    """
    Model Django para persistir Empresas.

    Fields:
        razon_social: Denominación legal
        cif: Código de identificación fiscal (único)
        fecha_alta: Fecha de alta (no se modifica tras el alta)
        activo: False tras una baja lógica
    """

    id = models.BigAutoField(primary_key=True)

    razon_social = models.CharField(
        max_length=200,
        help_text="Denominación legal de la empresa"
    )

    cif = models.CharField(
        max_length=20,
        unique=True,
        help_text="Código de identificación fiscal"
    )

    email = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Email de contacto"
    )

    telefono = models.CharField(
        max_length=20,
        null=True,
        blank=True,
    )

    sector = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        db_index=True,
        help_text="Sector de actividad"
    )

    fecha_alta = models.DateField(
        help_text="Fecha de alta en el sistema"
    )

    activo = models.BooleanField(
        default=True,
        db_index=True,
        help_text="False cuando la empresa está dada de baja"
    )

    facturacion_anual = models.FloatField(
        null=True,
        blank=True,
        help_text="Facturación anual"
    )

    numero_empleados = models.IntegerField(
        null=True,
        blank=True,
    )

    class Meta:
        db_table = 'empresas'
        verbose_name = 'Empresa'
        verbose_name_plural = 'Empresas'
        ordering = ['id']

    def __str__(self):
        return f"{self.razon_social} ({self.cif})"

    def __repr__(self):
        return f"<EmpresaModel id={self.id} cif={self.cif}>"


class SedeModel(models.Model):
    """
    Model Django para persistir Sedes.

    La FK es la única dirección de la relación que se almacena; las
    sedes de una empresa se obtienen filtrando por empresa_id.
    """

    id = models.BigAutoField(primary_key=True)

    nombre = models.CharField(
        max_length=150,
        help_text="Nombre de la sede"
    )

    direccion = models.CharField(
        max_length=255,
        help_text="Dirección postal"
    )

    ciudad = models.CharField(
        max_length=100,
        db_index=True,
    )

    provincia = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        db_index=True,
    )

    codigo_postal = models.CharField(
        max_length=10,
        null=True,
        blank=True,
    )

    pais = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        default='España',
    )

    telefono = models.CharField(
        max_length=20,
        null=True,
        blank=True,
    )

    email = models.CharField(
        max_length=100,
        null=True,
        blank=True,
    )

    es_principal = models.BooleanField(
        default=False,
        help_text="Sede principal de la empresa"
    )

    capacidad_almacenamiento = models.FloatField(
        null=True,
        blank=True,
        help_text="Capacidad de almacenamiento en m²"
    )

    horario_recepcion = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Horario de recepción de mercancías"
    )

    empresa = models.ForeignKey(
        EmpresaModel,
        on_delete=models.CASCADE,
        related_name='sedes',
        help_text="Empresa propietaria"
    )

    class Meta:
        db_table = 'sedes'
        verbose_name = 'Sede'
        verbose_name_plural = 'Sedes'
        ordering = ['id']
        constraints = [
            models.UniqueConstraint(
                fields=['empresa'],
                condition=Q(es_principal=True),
                name='uq_sede_principal_por_empresa',
            ),
        ]

    def __str__(self):
        return f"{self.nombre} ({self.ciudad})"

    def __repr__(self):
        return f"<SedeModel id={self.id} empresa_id={self.empresa_id} principal={self.es_principal}>"
