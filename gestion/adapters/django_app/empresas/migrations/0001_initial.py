"""
Migración inicial de los dominios de Empresas y Sedes.

Crea las tablas:
- empresas: Empresas (cif único)
- sedes: Sedes de cada empresa (FK en cascada, una sola principal por empresa)
"""

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    """Migración inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabla: empresas
        # =================================================================
        migrations.CreateModel(
            name='EmpresaModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('razon_social', models.CharField(
                    max_length=200,
                    help_text='Denominación legal de la empresa'
                )),
                ('cif', models.CharField(
                    max_length=20,
                    unique=True,
                    help_text='Código de identificación fiscal'
                )),
                ('email', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    help_text='Email de contacto'
                )),
                ('telefono', models.CharField(max_length=20, null=True, blank=True)),
                ('sector', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    db_index=True,
                    help_text='Sector de actividad'
                )),
                ('fecha_alta', models.DateField(
                    help_text='Fecha de alta en el sistema'
                )),
                ('activo', models.BooleanField(
                    default=True,
                    db_index=True,
                    help_text='False cuando la empresa está dada de baja'
                )),
                ('facturacion_anual', models.FloatField(
                    null=True,
                    blank=True,
                    help_text='Facturación anual'
                )),
                ('numero_empleados', models.IntegerField(null=True, blank=True)),
            ],
            options={
                'verbose_name': 'Empresa',
                'verbose_name_plural': 'Empresas',
                'db_table': 'empresas',
                'ordering': ['id'],
            },
        ),

        # =================================================================
        # Tabla: sedes
        # =================================================================
        migrations.CreateModel(
            name='SedeModel',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('nombre', models.CharField(
                    max_length=150,
                    help_text='Nombre de la sede'
                )),
                ('direccion', models.CharField(
                    max_length=255,
                    help_text='Dirección postal'
                )),
                ('ciudad', models.CharField(max_length=100, db_index=True)),
                ('provincia', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    db_index=True
                )),
                ('codigo_postal', models.CharField(max_length=10, null=True, blank=True)),
                ('pais', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    default='España'
                )),
                ('telefono', models.CharField(max_length=20, null=True, blank=True)),
                ('email', models.CharField(max_length=100, null=True, blank=True)),
                ('es_principal', models.BooleanField(
                    default=False,
                    help_text='Sede principal de la empresa'
                )),
                ('capacidad_almacenamiento', models.FloatField(
                    null=True,
                    blank=True,
                    help_text='Capacidad de almacenamiento en m²'
                )),
                ('horario_recepcion', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    help_text='Horario de recepción de mercancías'
                )),
                ('empresa', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='sedes',
                    to='empresas.empresamodel',
                    help_text='Empresa propietaria'
                )),
            ],
            options={
                'verbose_name': 'Sede',
                'verbose_name_plural': 'Sedes',
                'db_table': 'sedes',
                'ordering': ['id'],
            },
        ),

        # Una sola sede principal por empresa
        migrations.AddConstraint(
            model_name='sedemodel',
            constraint=models.UniqueConstraint(
                condition=models.Q(('es_principal', True)),
                fields=('empresa',),
                name='uq_sede_principal_por_empresa',
            ),
        ),
    ]
