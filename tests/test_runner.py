"""
Tests del runner de escenarios.
"""

from unittest.mock import MagicMock, patch

import pytest

from pattern_catalog.core.registry import ScenarioNotFoundError, registry
from pattern_catalog.core.runner import ScenarioRunner, run_scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


def _failing(out: ScenarioOutput) -> None:
    out.write("antes del fallo")
    raise RuntimeError("fallo simulado")


class TestRun:
    def test_run_returns_output(self, runner):
        """run() devuelve un ScenarioOutput con el nombre canonico."""
        output = runner.run("factory")

        assert isinstance(output, ScenarioOutput)
        assert output.pattern == "factory_method"
        assert len(output) == 4

    def test_sink_receives_lines_unmodified(self, runner):
        """El sink recibe cada linea tal cual, en orden."""
        received = []
        output = runner.run("builder", sink=received.append)

        assert received == output.lines

    def test_unknown_pattern_raises(self, runner):
        """Un nombre desconocido lanza ScenarioNotFoundError."""
        with pytest.raises(ScenarioNotFoundError):
            runner.run("interpreter")

    def test_scenario_error_propagates(self, runner, temporary_scenario):
        """Los errores del escenario se registran y se propagan."""
        temporary_scenario("falla", _failing)

        with patch.object(runner.logger, 'error') as mock_error:
            with pytest.raises(RuntimeError, match="fallo simulado"):
                runner.run("falla")

        mock_error.assert_called_once()
        assert mock_error.call_args.kwargs['exc_info'] is True

    def test_run_is_logged(self, runner):
        """Cada ejecucion termina con log_scenario."""
        manager = MagicMock()
        with patch('pattern_catalog.core.runner.get_logger_manager', return_value=manager):
            output = runner.run("strategy")

        pattern, line_count, duration_ms = manager.log_scenario.call_args.args
        assert pattern == "strategy"
        assert line_count == len(output)
        assert duration_ms >= 0

    def test_run_scenario_helper(self):
        """run_scenario() es un atajo sobre ScenarioRunner."""
        assert run_scenario("cor").lines == ScenarioRunner().run("chain").lines


class TestRunAll:
    def test_runs_whole_catalog(self, runner):
        """run_all() devuelve las 22 salidas en orden de catalogo."""
        outputs = runner.run_all()

        assert list(outputs) == registry.list_names()
        assert all(len(output) > 0 for output in outputs.values())

    def test_group_filter(self, runner):
        """run_all(group) solo ejecuta esa familia."""
        outputs = runner.run_all(PatternGroup.CREATIONAL)
        assert list(outputs) == registry.list_names(PatternGroup.CREATIONAL)

    def test_failures_are_skipped(self, temporary_scenario):
        """Sin fail_fast, un fallo se omite y el resto continua."""
        temporary_scenario("falla", _failing)
        runner = ScenarioRunner(fail_fast=False)

        outputs = runner.run_all(PatternGroup.BEHAVIORAL)

        assert "falla" not in outputs
        assert "visitor" in outputs

    def test_fail_fast_reraises(self, temporary_scenario):
        """Con fail_fast, el primer fallo se propaga."""
        temporary_scenario("falla", _failing)
        runner = ScenarioRunner(fail_fast=True)

        with pytest.raises(RuntimeError):
            runner.run_all(PatternGroup.BEHAVIORAL)

    def test_custom_registry(self):
        """Un registro inyectado se usa en lugar del global."""
        fake = MagicMock()
        fake.list_scenarios.return_value = []

        outputs = ScenarioRunner(scenario_registry=fake).run_all()

        assert outputs == {}
        fake.list_scenarios.assert_called_once_with(None)


class TestDeterminism:
    def test_every_scenario_is_deterministic(self, runner):
        """Dos ejecuciones del mismo escenario producen las mismas lineas."""
        for name in registry.list_names():
            first = runner.run(name).lines
            second = runner.run(name).lines
            assert first == second, name
