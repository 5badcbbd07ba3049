"""
Utilidades comunes para el catalogo de patrones.

Este modulo centraliza utilidades compartidas por toda la aplicacion,
incluyendo el LoggerManager Singleton para logging consistente.

Los logs se escriben en stderr: stdout queda reservado para las lineas
de salida de los escenarios.
"""

import logging
import sys
from typing import Optional, Dict, Any

from pattern_catalog.config.settings import LOG_LEVEL


# ============================================================================
# Singleton Logger - Patron Singleton para gestion centralizada de logging
# ============================================================================

class LoggerManager:
    """
    Singleton para gestion centralizada de logging.

    Proporciona una interfaz unificada para logging en toda la aplicacion,
    con configuracion centralizada y formateo consistente.

    Usage:
        from pattern_catalog.utils import get_logger_manager

        logger_mgr = get_logger_manager()
        logger_mgr.info("Message")
        logger_mgr.debug("Debug info", context={'pattern': 'builder'})
    """
    _instance = None

    def __new__(cls):
        """
        Implementacion del patron Singleton.

        Asegura que solo exista una instancia de LoggerManager.
        """
        if cls._instance is None:
            cls._instance = super(LoggerManager, cls).__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """
        Inicializa el logger manager (solo una vez).
        """
        if self._initialized:
            return

        self._initialized = True
        self._loggers = {}
        self._default_level = logging.getLevelName(LOG_LEVEL)
        self._setup_root_logger()

    def _setup_root_logger(self):
        """
        Configura el logger del paquete con formato y handler a stderr.
        """
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)

        package_logger = logging.getLogger('pattern_catalog')
        package_logger.setLevel(self._default_level)

        # Evitar duplicados
        if not package_logger.handlers:
            package_logger.addHandler(console_handler)

    def get_logger(self, name: str) -> logging.Logger:
        """
        Obtiene un logger por nombre (con cache).

        Los nombres se cuelgan del logger 'pattern_catalog' para heredar
        su handler.

        Args:
            name: Nombre del logger (modulo o clase)

        Returns:
            logging.Logger: Logger configurado
        """
        if name not in self._loggers:
            qualified = (
                name if name.startswith('pattern_catalog')
                else f'pattern_catalog.{name}'
            )
            self._loggers[name] = logging.getLogger(qualified)

        return self._loggers[name]

    def set_level(self, level: int):
        """
        Establece el nivel de logging global del paquete.

        Args:
            level: Nivel de logging (logging.DEBUG, INFO, WARNING, ...)
        """
        self._default_level = level
        logging.getLogger('pattern_catalog').setLevel(level)

    @property
    def level(self) -> int:
        """Nivel de logging actual."""
        return self._default_level

    @classmethod
    def get_instance(cls) -> 'LoggerManager':
        """
        Obtiene la instancia única del LoggerManager.

        Returns:
            LoggerManager: Instancia única del singleton
        """
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def _format(self, message: str, context: Optional[Dict[str, Any]]) -> str:
        if context:
            return f"{message} | Context: {context}"
        return message

    def info(self, message: str, context: Optional[Dict[str, Any]] = None, logger_name: str = 'default'):
        """Log de nivel INFO con contexto opcional."""
        self.get_logger(logger_name).info(self._format(message, context))

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None, logger_name: str = 'default'):
        """Log de nivel DEBUG con contexto opcional."""
        self.get_logger(logger_name).debug(self._format(message, context))

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None, logger_name: str = 'default'):
        """Log de nivel WARNING con contexto opcional."""
        self.get_logger(logger_name).warning(self._format(message, context))

    def error(self, message: str, exc_info: bool = False, context: Optional[Dict[str, Any]] = None, logger_name: str = 'default'):
        """
        Log de nivel ERROR con contexto opcional y stack trace.

        Args:
            message: Mensaje a registrar
            exc_info: Si incluir informacion de excepcion
            context: Contexto adicional (opcional)
            logger_name: Nombre del logger a usar
        """
        self.get_logger(logger_name).error(
            self._format(message, context), exc_info=exc_info
        )

    def log_scenario(self, pattern: str, line_count: int, duration_ms: Optional[float] = None):
        """
        Log especializado para escenarios ejecutados.

        Args:
            pattern: Nombre del patron
            line_count: Numero de lineas producidas
            duration_ms: Duracion de la ejecucion en ms (opcional)
        """
        context = {
            'pattern': pattern,
            'lines': line_count
        }

        if duration_ms is not None:
            context['duration_ms'] = f"{duration_ms:.2f}"

        self.info(
            "Scenario finished",
            context=context,
            logger_name='scenarios'
        )


# ============================================================================
# Funciones de Acceso al Singleton
# ============================================================================

def get_logger_manager() -> LoggerManager:
    """
    Funcion de conveniencia para obtener la instancia del LoggerManager.

    Returns:
        LoggerManager: Instancia única del singleton
    """
    return LoggerManager.get_instance()


def get_logger(name: str) -> logging.Logger:
    """
    Funcion de conveniencia para obtener un logger.

    Args:
        name: Nombre del logger (típicamente __name__ o el nombre de la clase)

    Returns:
        logging.Logger: Logger configurado

    Usage:
        from pattern_catalog.utils import get_logger

        logger = get_logger(__name__)
        logger.info("Message")
    """
    return LoggerManager.get_instance().get_logger(name)


# ============================================================================
# Utilidades Generales
# ============================================================================

def truncate_text(text: str, max_length: int = 60, suffix: str = "...") -> str:
    """
    Trunca texto a una longitud maxima.

    Args:
        text: Texto a truncar
        max_length: Longitud maxima
        suffix: Sufijo a anhadir si se trunca (default: "...")

    Returns:
        str: Texto truncado
    """
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix


def normalize_name(name: str) -> str:
    """
    Normaliza un nombre de patron para busquedas en el registro.

    "Factory Method", "factory-method" y "FACTORY_METHOD" producen
    "factory_method".

    Args:
        name: Nombre tal como lo escribio el usuario

    Returns:
        str: Nombre normalizado
    """
    return "_".join(
        name.strip().lower().replace('-', ' ').replace('_', ' ').split()
    )
