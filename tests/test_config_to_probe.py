import pytest

from otelcolspec.config_from import config_from_string
from otelcolspec.config_to_probe import (
    ExtensionsNotAMapError,
    NoExtensionHealthCheckError,
    NoExtensionsError,
    NoServiceError,
    NoServiceExtensionHealthCheckError,
    NoServiceExtensionsError,
    ProbeConfigError,
    ServiceExtensionsNotAListError,
    ServiceNotAMapError,
    config_to_container_probe,
)

HAPPY_CASES = [
    (
        "SimpleHappyPath",
        "extensions:\n  health_check:\nservice:\n  extensions: [health_check]",
        13133,
        "/",
    ),
    (
        "CustomEndpointAndPath",
        "extensions:\n  health_check:\n    endpoint: localhost:1234\n"
        "    path: /checkit\nservice:\n  extensions: [health_check]",
        1234,
        "/checkit",
    ),
    (
        "CustomEndpointAndDefaultPath",
        "extensions:\n  health_check:\n    endpoint: localhost:1234\n"
        "service:\n  extensions: [health_check]",
        1234,
        "/",
    ),
    (
        "CustomEndpointWithJustPortAndDefaultPath",
        "extensions:\n  health_check:\n    endpoint: :1234\n"
        "service:\n  extensions: [health_check]",
        1234,
        "/",
    ),
    (
        "DefaultEndpointAndCustomPath",
        "extensions:\n  health_check:\n    path: /checkit\n"
        "service:\n  extensions: [health_check]",
        13133,
        "/checkit",
    ),
    (
        "DefaultEndpointForUnexpectedEndpoint",
        'extensions:\n  health_check:\n    endpoint: 0:0:0"\n'
        "service:\n  extensions: [health_check]",
        13133,
        "/",
    ),
    (
        "DefaultEndpointForUnparseablendpoint",
        'extensions:\n  health_check:\n    endpoint:\n      this: should-not-be-a-map"\n'
        "service:\n  extensions: [health_check]",
        13133,
        "/",
    ),
    (
        "WillUseSecondServiceExtension",
        "extensions:\n  health_check:\n"
        "service:\n  extensions: [health_check/1, health_check]",
        13133,
        "/",
    ),
]


@pytest.mark.parametrize(
    ("config_str", "port", "path"),
    [case[1:] for case in HAPPY_CASES],
    ids=[case[0] for case in HAPPY_CASES],
)
def test_creates_probe(config_str, port, path):
    config = config_from_string(config_str)
    assert config
    probe = config_to_container_probe(config)
    assert probe.http_get.path == path
    assert probe.http_get.port == port
    assert probe.http_get.host == ""


ERROR_CASES = [
    (
        "NoHealthCheckExtension",
        "extensions:\n  pprof:\nservice:\n  extensions: [health_check]",
        NoExtensionHealthCheckError,
    ),
    (
        "BadlyFormattedExtensions",
        "extensions: [hi]\nservice:\n  extensions: [health_check]",
        ExtensionsNotAMapError,
    ),
    (
        "NoExtensions",
        "service:\n  extensions: [health_check]",
        NoExtensionsError,
    ),
    (
        "NoHealthCheckInServiceExtensions",
        "service:\n  extensions: [pprof]",
        NoServiceExtensionHealthCheckError,
    ),
    (
        "BadlyFormattedServiceExtensions",
        "service:\n  extensions:\n    this: should-not-be-a-map",
        ServiceExtensionsNotAListError,
    ),
    (
        "NoServiceExtensions",
        "service:\n  pipelines:\n    traces:\n      receivers: [otlp]",
        NoServiceExtensionsError,
    ),
    (
        "BadlyFormattedService",
        "extensions:\n  health_check:\nservice: [hi]",
        ServiceNotAMapError,
    ),
    (
        "NoService",
        "extensions:\n  health_check:",
        NoServiceError,
    ),
]


@pytest.mark.parametrize(
    ("config_str", "error"),
    [case[1:] for case in ERROR_CASES],
    ids=[case[0] for case in ERROR_CASES],
)
def test_errors(config_str, error):
    config = config_from_string(config_str)
    assert config
    with pytest.raises(error):
        config_to_container_probe(config)


def test_errors_share_a_base_and_carry_messages():
    with pytest.raises(ProbeConfigError) as info:
        config_to_container_probe({})
    assert str(info.value) == "no service available as part of the configuration"


def test_named_port_is_kept_as_string():
    config = config_from_string(
        "extensions:\n  health_check:\n    endpoint: localhost:health\n"
        "service:\n  extensions: [health_check]"
    )
    assert config_to_container_probe(config).http_get.port == "health"


def test_first_configured_health_check_wins():
    config = config_from_string(
        "extensions:\n  health_check/a:\n    endpoint: :1111\n"
        "  health_check/b:\n    endpoint: :2222\n"
        "service:\n  extensions: [health_check/b, health_check/a]"
    )
    assert config_to_container_probe(config).http_get.port == 2222