"""
Tests de los patrones estructurales.
"""

from decimal import Decimal
from unittest.mock import patch

import pytest

from pattern_catalog.patterns.structural.adapter import (
    ImperialSpeedometer,
    ImperialToMetricAdapter,
    MetricSpeedometer
)
from pattern_catalog.patterns.structural.bridge import (
    AdvancedRemoteControl,
    Radio,
    RemoteControl,
    Television
)
from pattern_catalog.patterns.structural.composite import (
    Branch,
    Leaf,
    UnsupportedOperationError
)
from pattern_catalog.patterns.structural.decorator import (
    Espresso,
    HouseBlend,
    Milk,
    Mocha,
    Whip
)
from pattern_catalog.patterns.structural.facade import (
    Battery,
    CarStarterFacade,
    Dashboard,
    FuelPump,
    Ignition
)
from pattern_catalog.patterns.structural.flyweight import Forest, TreeTypeFactory
from pattern_catalog.patterns.structural.proxy import (
    ProtectedDocumentProxy,
    RealDocument
)


class TestAdapter:
    def test_adapter_translates_units(self):
        """El adaptador convierte mph a km/h en ambos sentidos."""
        imperial = ImperialSpeedometer(mph=50)
        adapter = ImperialToMetricAdapter(imperial)

        adapter.set_limit_kmh(100)

        assert isinstance(adapter, MetricSpeedometer)
        assert adapter.speed_kmh() == pytest.approx(80.4672)
        assert imperial.get_limit_mph() == pytest.approx(62.1371, rel=1e-4)
        assert adapter.limit_kmh() == pytest.approx(100)


class TestBridge:
    @pytest.mark.parametrize("device_cls", [Television, Radio])
    def test_remote_works_with_any_device(self, device_cls):
        """La misma abstraccion controla cualquier implementacion."""
        device = device_cls()
        remote = RemoteControl(device)

        remote.toggle_power()
        remote.volume_up()

        assert device.is_enabled()
        assert device.get_volume() == 40

    def test_volume_is_clamped(self):
        """El volumen queda entre 0 y 100."""
        device = Radio()
        remote = AdvancedRemoteControl(device)
        for _ in range(10):
            remote.volume_up()
        assert device.get_volume() == 100

        remote.mute()
        remote.volume_down()
        assert device.get_volume() == 0


class TestComposite:
    def _tree(self):
        trunk = Branch("Tronco")
        left = Branch("Izquierda")
        left.add(Leaf("A"))
        left.add(Leaf("B"))
        trunk.add(left)
        trunk.add(Leaf("C"))
        return trunk, left

    def test_render_depth_first(self):
        """render() recorre en profundidad en orden de insercion."""
        trunk, _ = self._tree()
        assert trunk.render() == ["+ Tronco", "  + Izquierda", "    - A", "    - B", "  - C"]

    def test_count_leaves(self):
        """count_leaves() trata hojas y ramas de forma uniforme."""
        trunk, left = self._tree()
        assert trunk.count_leaves() == 3
        assert left.count_leaves() == 2
        assert Leaf("X").count_leaves() == 1

    def test_remove(self):
        """remove() quita un hijo directo."""
        trunk, left = self._tree()
        trunk.remove(left)
        assert trunk.count_leaves() == 1
        assert len(trunk.children) == 1

    def test_leaf_rejects_children(self):
        """Una hoja no admite hijos."""
        leaf = Leaf("X")
        with pytest.raises(UnsupportedOperationError):
            leaf.add(Leaf("Y"))
        with pytest.raises(NotImplementedError):
            leaf.remove(Leaf("Y"))
        assert leaf.children == ()


class TestDecorator:
    def test_costs_accumulate(self):
        """Cada capa suma su precio y su descripcion."""
        beverage = Whip(Mocha(Mocha(HouseBlend())))

        assert beverage.cost() == Decimal("1.44")
        assert beverage.description() == "Cafe de la casa + moca + moca + nata"

    def test_order_does_not_change_cost(self):
        """El orden de las capas no cambia el precio."""
        assert Mocha(Milk(Espresso())).cost() == Milk(Mocha(Espresso())).cost()


class TestFacade:
    def test_start_and_stop_sequence(self):
        """La fachada orquesta los subsistemas en orden."""
        battery, pump, ignition = Battery(), FuelPump(), Ignition()
        car = CarStarterFacade(battery, pump, ignition, Dashboard())

        started = car.start()
        assert started[0].startswith("Bateria")
        assert started[-1] == "Cuadro: listo para conducir"

        stopped = car.stop()
        assert stopped[0].startswith("Encendido")
        assert stopped[-1] == "Cuadro: vehiculo apagado"


class TestFlyweight:
    def test_types_are_shared(self):
        """El mismo estado intrinseco devuelve la misma instancia."""
        factory = TreeTypeFactory()
        forest = Forest(factory)

        first = forest.plant(0, 0, "Pino", "verde", "escamosa")
        second = forest.plant(5, 5, "Pino", "verde", "escamosa")
        forest.plant(9, 9, "Roble", "verde oscuro", "rugosa")

        assert first.tree_type is second.tree_type
        assert factory.type_count == 2
        assert len(forest) == 3

    def test_extrinsic_state_passed_per_call(self):
        """Las coordenadas llegan en cada draw()."""
        tree_type = TreeTypeFactory().get_tree_type("Pino", "verde", "escamosa")
        assert tree_type.draw(3, 4) == "Pino (verde, escamosa) en (3, 4)"


class TestProxy:
    def test_denied_read_does_not_load(self):
        """Un acceso denegado no crea el documento real."""
        proxy = ProtectedDocumentProxy("Informe", allowed_roles=["admin"])

        with patch('pattern_catalog.patterns.structural.proxy.RealDocument') as mock_document:
            assert proxy.read("invitado") == "Acceso denegado para el rol 'invitado'"

        mock_document.assert_not_called()
        assert not proxy.is_loaded
        assert proxy.load_count == 0

    def test_real_document_loaded_once(self):
        """El documento real se crea en la primera lectura permitida."""
        proxy = ProtectedDocumentProxy("Informe", allowed_roles=["admin"])

        proxy.read("admin")
        content = proxy.read("admin")

        assert content == "Contenido confidencial de 'Informe'"
        assert proxy.load_count == 1

    def test_load_count_is_per_proxy(self):
        """Cada proxy cuenta solo sus propias cargas."""
        first = ProtectedDocumentProxy("Informe", allowed_roles=["admin"])
        second = ProtectedDocumentProxy("Informe", allowed_roles=["admin"])

        first.read("admin")

        assert first.load_count == 1
        assert second.load_count == 0
        assert not hasattr(RealDocument, "loads")
