import pytest

from otelcolspec.generic import generic_receiver_parser
from otelcolspec.jaeger import jaeger_receiver_parser
from otelcolspec.receiver import ReceiverParser
from otelcolspec.registry import builder_for, is_registered, parser_for, register


class _MockParser(ReceiverParser):
    def ports(self):
        return []

    def parser_name(self):
        return "__mock"


@pytest.mark.parametrize("name", ["jaeger", "otlp", "zipkin", "splunk_hec"])
def test_self_registered(name):
    assert is_registered(name) is True


def test_unknown_not_registered():
    assert is_registered("myreceiver") is False


def test_jaeger_found_by_name():
    assert parser_for("jaeger", {}).parser_name() == "__jaeger"


def test_otlp_found_by_name():
    assert parser_for("otlp", {}).parser_name() == "__otlp"


def test_fallback_when_not_registered():
    assert parser_for("myreceiver", {}).parser_name() == "__generic"
    assert builder_for("myreceiver") is generic_receiver_parser


def test_named_instance_uses_type():
    assert builder_for("jaeger/custom") is jaeger_receiver_parser


def test_should_find_registered_parser():
    calls = []

    def builder(name, config):
        calls.append((name, config))
        return _MockParser()

    register("mock-registry", builder)
    parser = parser_for("mock-registry/one", {"a": 1})

    assert calls == [("mock-registry/one", {"a": 1})]
    assert parser.parser_name() == "__mock"
    assert is_registered("mock-registry") is True