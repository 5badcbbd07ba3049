"""
Tests de los patrones creacionales.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from pattern_catalog.patterns.creational.abstract_factory import (
    OffRoadVehicleFactory,
    SportVehicleFactory,
    VehicleFamilyFactory
)
from pattern_catalog.patterns.creational.builder import (
    CarBuilder,
    Color,
    MotorbikeBuilder,
    Vehicle,
    VehicleDirector
)
from pattern_catalog.patterns.creational.factory_method import (
    CarFactory,
    MotorbikeFactory,
    VehicleFactory
)
from pattern_catalog.patterns.creational.prototype import (
    Engine,
    PrototypeCatalog,
    VehiclePrototype
)
from pattern_catalog.patterns.creational.singleton import AppConfiguration


class TestFactoryMethod:
    @pytest.mark.parametrize("factory,wheels", [
        (CarFactory(), 4),
        (MotorbikeFactory(), 2),
    ])
    def test_factory_creates_its_product(self, factory, wheels):
        """Cada fabrica decide las ruedas; el color viene del llamador."""
        vehicle = factory.create("verde")

        assert vehicle.wheels == wheels
        assert vehicle.color == "verde"

    def test_deliver_uses_factory_method(self):
        """deliver() usa create() sin conocer el producto concreto."""
        assert CarFactory().deliver("rojo") == "Entregado: Coche de color rojo con 4 ruedas"

    def test_abstract_creator(self):
        """El creador abstracto no se puede instanciar."""
        with pytest.raises(TypeError):
            VehicleFactory()


class TestAbstractFactory:
    @pytest.mark.parametrize("factory", [SportVehicleFactory(), OffRoadVehicleFactory()])
    def test_products_share_family(self, factory):
        """Todos los productos de una fabrica pertenecen a la misma familia."""
        families = {
            product.family
            for product in (
                factory.create_car(),
                factory.create_motorbike(),
                factory.create_car(),
                factory.create_motorbike(),
            )
        }
        assert len(families) == 1

    def test_families_differ(self):
        """Fabricas distintas producen familias distintas."""
        assert (
            SportVehicleFactory().create_car().family
            != OffRoadVehicleFactory().create_car().family
        )

    def test_abstract_factory_contract(self):
        """La fabrica abstracta no se puede instanciar."""
        with pytest.raises(TypeError):
            VehicleFamilyFactory()


class TestBuilder:
    @pytest.mark.parametrize("builder_cls,wheels", [
        (CarBuilder, 4),
        (MotorbikeBuilder, 2),
    ])
    def test_fluent_build(self, builder_cls, wheels):
        """set_wheels().set_color(RED).get_result() respeta el tipo y el color."""
        builder = builder_cls()
        vehicle = builder.set_wheels().set_color(Color.RED).get_result()

        assert vehicle.wheels == wheels
        assert vehicle.color is Color.RED

    def test_get_result_resets_builder(self):
        """Tras get_result(), el builder vuelve a un producto vacio."""
        builder = CarBuilder()
        builder.set_wheels().set_seats(3).get_result()

        assert builder.get_result() == Vehicle()

    def test_builder_is_reusable(self):
        """El builder se reinicia, no se consume."""
        builder = MotorbikeBuilder()
        first = builder.set_wheels().get_result()
        second = builder.set_wheels().set_color(Color.BLUE).get_result()

        assert first is not second
        assert first.color is None
        assert second.color is Color.BLUE

    def test_director_standard(self):
        """El director aplica una secuencia fija de pasos."""
        builder = CarBuilder()
        VehicleDirector().construct_standard(builder)

        assert builder.get_result() == Vehicle(kind="Coche", wheels=4, color=Color.BLACK, seats=5)


class TestPrototype:
    def test_shallow_clone_shares_engine(self):
        """El clon superficial ve los cambios del motor original."""
        original = VehiclePrototype("Roadster", "rojo", Engine(150))
        shallow = original.clone()

        original.engine.horsepower = 300

        assert shallow is not original
        assert shallow.engine is original.engine
        assert shallow.engine.horsepower == 300

    def test_deep_clone_is_independent(self):
        """El clon profundo no ve los cambios del motor original."""
        original = VehiclePrototype("Roadster", "rojo", Engine(150), ["techo solar"])
        deep = original.deep_clone()

        original.engine.horsepower = 300
        original.extras.append("spoiler")

        assert deep.engine.horsepower == 150
        assert deep.extras == ["techo solar"]

    def test_clone_with_overrides(self):
        """clone_with_overrides ignora campos inexistentes."""
        original = VehiclePrototype("Compacto", "blanco", Engine(90))
        cloned = original.clone_with_overrides(color="verde", wings=2)

        assert cloned.color == "verde"
        assert not hasattr(cloned, "wings")
        assert original.color == "blanco"

    def test_catalog_hands_out_copies(self):
        """El catalogo entrega copias y conserva la plantilla."""
        catalog = PrototypeCatalog()
        catalog.register("urbano", VehiclePrototype("Compacto", "blanco", Engine(90)))

        first = catalog.get("urbano")
        first.engine.horsepower = 1

        assert catalog.get("urbano").engine.horsepower == 90
        assert catalog.get("desconocido") is None
        assert catalog.list_names() == ["urbano"]


class TestSingleton:
    def test_first_caller_wins(self):
        """La primera llamada fija el valor; las siguientes lo ignoran."""
        first = AppConfiguration.get_instance("a")
        second = AppConfiguration.get_instance("b")

        assert first is second
        assert second.value == "a"

    def test_direct_construction_rejected(self):
        """El constructor no es publico."""
        with pytest.raises(TypeError):
            AppConfiguration("directo")

    def test_concurrent_first_callers(self):
        """K llamadores concurrentes ven una sola instancia y un solo valor."""
        callers = 16
        barrier = threading.Barrier(callers)

        def acquire(value):
            barrier.wait()
            return AppConfiguration.get_instance(value)

        with ThreadPoolExecutor(max_workers=callers) as executor:
            results = list(executor.map(acquire, range(callers)))

        assert len({id(result) for result in results}) == 1
        assert len({result.value for result in results}) == 1
        assert AppConfiguration.instances_created == 1

    def test_reset(self):
        """reset() descarta la instancia y el contador."""
        AppConfiguration.get_instance("a")
        AppConfiguration.reset()

        assert not AppConfiguration.is_initialized()
        assert AppConfiguration.instances_created == 0
        assert AppConfiguration.get_instance("b").value == "b"
