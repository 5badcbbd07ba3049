"""
Configuracion centralizada para el catalogo de patrones.

Este modulo contiene todas las configuraciones de la aplicacion,
incluyendo logging, el runner de escenarios y los parametros de las
demostraciones.

Las configuraciones pueden ser sobrescritas con variables de entorno
o con un archivo .env en el directorio de trabajo.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv


# Cargar variables de entorno desde .env (si existe)
_env_path = Path.cwd() / '.env'
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path)


# ============================================================================
# CONFIGURACION GENERAL
# ============================================================================

# Entorno de ejecucion (development, staging, production)
ENVIRONMENT = os.getenv('ENVIRONMENT', 'production')
IS_PRODUCTION = ENVIRONMENT == 'production'
IS_DEVELOPMENT = ENVIRONMENT == 'development'

# Logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING').upper()


# ============================================================================
# CONFIGURACION DEL RUNNER
# ============================================================================

# Si es true, run_all se detiene en el primer escenario que falle
RUNNER_FAIL_FAST = os.getenv('RUNNER_FAIL_FAST', 'false').lower() == 'true'

# Longitud maxima del resumen en el listado del CLI
SUMMARY_MAX_LENGTH = int(os.getenv('SUMMARY_MAX_LENGTH', '60'))


# ============================================================================
# CONFIGURACION DE ESCENARIOS
# ============================================================================

# Numero de hilos concurrentes en la demostracion de Singleton
SINGLETON_DEMO_THREADS = int(os.getenv('SINGLETON_DEMO_THREADS', '8'))


# ============================================================================
# CONFIGURACION DE DESARROLLO
# ============================================================================

if IS_DEVELOPMENT:
    # En desarrollo, usar logs más verbosos
    LOG_LEVEL = 'DEBUG'


# ============================================================================
# VALIDACION DE CONFIGURACION
# ============================================================================

def validate_config() -> list:
    """
    Valida que la configuracion sea correcta.

    Returns:
        Lista de errores (vacia si la configuracion es valida)
    """
    errors = []

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        errors.append(f"LOG_LEVEL invalido: {LOG_LEVEL}")

    if SINGLETON_DEMO_THREADS < 1:
        errors.append(
            f"SINGLETON_DEMO_THREADS debe ser >= 1: {SINGLETON_DEMO_THREADS}"
        )

    if SUMMARY_MAX_LENGTH < 10:
        errors.append(
            f"SUMMARY_MAX_LENGTH debe ser >= 10: {SUMMARY_MAX_LENGTH}"
        )

    return errors


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================

def get_config_summary() -> dict:
    """
    Obtiene resumen de configuracion (para debugging).

    Returns:
        Diccionario con configuracion actual
    """
    return {
        'environment': ENVIRONMENT,
        'log_level': LOG_LEVEL,
        'runner_fail_fast': RUNNER_FAIL_FAST,
        'summary_max_length': SUMMARY_MAX_LENGTH,
        'singleton_demo_threads': SINGLETON_DEMO_THREADS,
    }


def print_config(write=print):
    """
    Imprime configuracion actual.

    Args:
        write: Funcion que recibe cada linea (default: print)
    """
    write("=" * 60)
    write("CONFIGURACION - CATALOGO DE PATRONES")
    write("=" * 60)

    for key, value in get_config_summary().items():
        write(f"  {key}: {value}")

    write("=" * 60)


# Validar configuracion al importar
_errors = validate_config()
if _errors:
    raise ValueError(
        "Configuracion invalida: " + "; ".join(_errors)
    )
