"""
Tests de configuracion, modelos y utilidades.
"""

import logging
from unittest.mock import patch

import pytest

from pattern_catalog.config import settings
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import (
    LoggerManager,
    get_logger,
    get_logger_manager,
    normalize_name,
    truncate_text
)


class TestSettings:
    def test_defaults_are_valid(self):
        """La configuracion por defecto no tiene errores."""
        assert settings.validate_config() == []

    def test_invalid_values_reported(self):
        """Los valores fuera de rango se reportan."""
        with patch.object(settings, 'SINGLETON_DEMO_THREADS', 0), \
                patch.object(settings, 'LOG_LEVEL', 'VERBOSO'):
            errors = settings.validate_config()

        assert len(errors) == 2
        assert any('LOG_LEVEL' in error for error in errors)

    def test_config_summary_keys(self):
        """El resumen expone todas las claves configurables."""
        summary = settings.get_config_summary()
        assert set(summary) == {
            'environment', 'log_level', 'runner_fail_fast',
            'summary_max_length', 'singleton_demo_threads'
        }

    def test_print_config_uses_writer(self):
        """print_config escribe con la funcion recibida."""
        lines = []
        settings.print_config(write=lines.append)

        assert lines[0] == "=" * 60
        assert lines[1] == "CONFIGURACION - CATALOGO DE PATRONES"


class TestModels:
    @pytest.mark.parametrize("value,expected", [
        ("creational", PatternGroup.CREATIONAL),
        ("Creacional", PatternGroup.CREATIONAL),
        (" estructural ", PatternGroup.STRUCTURAL),
        ("comportamiento", PatternGroup.BEHAVIORAL),
    ])
    def test_group_from_string(self, value, expected):
        """from_string acepta variantes en ingles y espanol."""
        assert PatternGroup.from_string(value) is expected

    def test_group_from_string_invalid(self):
        """Un grupo desconocido lanza ValueError."""
        with pytest.raises(ValueError):
            PatternGroup.from_string("funcional")

    def test_scenario_output(self):
        """ScenarioOutput conserva el orden y convierte a texto."""
        out = ScenarioOutput(pattern="demo")
        out.write("uno")
        out.extend([2, "tres"])

        assert list(out) == ["uno", "2", "tres"]
        assert len(out) == 3
        assert out.text() == "uno\n2\ntres"


class TestUtils:
    def test_logger_manager_singleton(self):
        """LoggerManager es unico."""
        assert LoggerManager() is get_logger_manager()

    def test_loggers_live_under_package(self):
        """Los loggers cuelgan del logger del paquete."""
        assert get_logger('Demo').name == 'pattern_catalog.Demo'

    def test_set_level(self):
        """set_level cambia el nivel del logger del paquete."""
        manager = get_logger_manager()
        previous = manager.level
        try:
            manager.set_level(logging.DEBUG)
            assert logging.getLogger('pattern_catalog').level == logging.DEBUG
        finally:
            manager.set_level(previous)

    def test_truncate_text(self):
        """truncate_text respeta la longitud maxima."""
        assert truncate_text("corto", 10) == "corto"
        truncated = truncate_text("x" * 30, 10)
        assert len(truncated) == 10
        assert truncated.endswith("...")

    @pytest.mark.parametrize("raw,expected", [
        ("Factory Method", "factory_method"),
        ("template-method", "template_method"),
        ("  Chain   of  Responsibility ", "chain_of_responsibility"),
    ])
    def test_normalize_name(self, raw, expected):
        """normalize_name produce el nombre canonico."""
        assert normalize_name(raw) == expected
