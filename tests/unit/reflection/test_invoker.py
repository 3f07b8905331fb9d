import pytest

from beanmeta.exceptions import InvocationError
from beanmeta.reflection import DefaultConstructor, FieldReader, FieldWriter, MethodInvoker, PropertyInvoker


class Sensor:
    def __init__(self):
        self.reading = 1.5

    def get_reading(self) -> float:
        return self.reading

    def get_fault(self) -> float:
        raise ValueError("sensor offline")

    @property
    def calibrated(self) -> bool:
        return True


class ReplacementSensor(Sensor):
    def get_reading(self) -> float:
        return 99.0


class Exploding:
    def __init__(self):
        raise RuntimeError("boom")


def test_method_invoker_dispatches_through_target():
    invoker = MethodInvoker("get_reading", Sensor.get_reading, float)

    assert invoker.invoke(Sensor()) == 1.5
    assert invoker.invoke(ReplacementSensor()) == 99.0


def test_method_failure_is_wrapped_with_context():
    invoker = MethodInvoker("get_fault", Sensor.get_fault, float)

    with pytest.raises(InvocationError) as exc_info:
        invoker.invoke(Sensor())

    err = exc_info.value
    assert err.member == "get_fault"
    assert err.owner is Sensor
    assert isinstance(err.__cause__, ValueError)
    assert "sensor offline" in str(err)


def test_read_only_property_write_is_wrapped():
    invoker = PropertyInvoker("calibrated", Sensor.calibrated.fget, bool, is_setter=True)

    with pytest.raises(InvocationError) as exc_info:
        invoker.invoke(Sensor(), (False,))

    assert isinstance(exc_info.value.__cause__, AttributeError)


def test_setter_requires_exactly_one_argument():
    writer = FieldWriter("reading", Sensor, float)

    with pytest.raises(InvocationError):
        writer.invoke(Sensor(), ())


def test_field_reader_and_writer():
    sensor = Sensor()
    FieldWriter("reading", Sensor, float).invoke(sensor, (2.0,))

    assert FieldReader("reading", Sensor, float).invoke(sensor) == 2.0
    with pytest.raises(InvocationError):
        FieldReader("missing", Sensor).invoke(sensor)


def test_default_constructor_wraps_failures():
    assert isinstance(DefaultConstructor(Sensor).new_instance(), Sensor)

    with pytest.raises(InvocationError) as exc_info:
        DefaultConstructor(Exploding).new_instance()

    assert exc_info.value.member == "__init__"
