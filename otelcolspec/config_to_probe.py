"""Derivation of a container liveness probe from the health_check extension."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_HEALTH_CHECK_PATH = "/"
DEFAULT_HEALTH_CHECK_PORT = 13133

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class HTTPGetAction:
    """An HTTP GET check against the container."""

    path: str
    port: int | str
    host: str = ""


@dataclass(frozen=True)
class Probe:
    """A container probe performed by an HTTP GET."""

    http_get: HTTPGetAction


class ProbeConfigError(ValueError):
    """The configuration doesn't describe a usable health check."""

    message = "invalid health check configuration"

    def __init__(self) -> None:
        super().__init__(self.message)


class NoServiceError(ProbeConfigError):
    message = "no service available as part of the configuration"


class ServiceNotAMapError(ProbeConfigError):
    message = "service property in the configuration doesn't contain valid services"


class NoServiceExtensionsError(ProbeConfigError):
    message = "service property in the configuration doesn't contain extensions"


class ServiceExtensionsNotAListError(ProbeConfigError):
    message = (
        "service extensions property in the configuration does not contain "
        "valid extensions"
    )


class NoServiceExtensionHealthCheckError(ProbeConfigError):
    message = "no healthcheck extension available in service extension configuration"


class NoExtensionsError(ProbeConfigError):
    message = "no extensions available as part of the configuration"


class ExtensionsNotAMapError(ProbeConfigError):
    message = (
        "extensions property in the configuration doesn't contain valid extensions"
    )


class NoExtensionHealthCheckError(ProbeConfigError):
    message = (
        "extensions property in the configuration does not contain the expected "
        "health_check extension"
    )


def config_to_container_probe(config: Mapping[Any, Any]) -> Probe:
    """Build a liveness probe from the configuration's health_check extension."""
    if "service" not in config:
        raise NoServiceError()
    service = config["service"]
    if not isinstance(service, Mapping):
        raise ServiceNotAMapError()

    if "extensions" not in service:
        raise NoServiceExtensionsError()
    service_extensions = service["extensions"]
    if not isinstance(service_extensions, list):
        raise ServiceExtensionsNotAListError()

    health_checks = [
        ext
        for ext in service_extensions
        if isinstance(ext, str) and ext.startswith("health_check")
    ]
    if not health_checks:
        raise NoServiceExtensionHealthCheckError()

    if "extensions" not in config:
        raise NoExtensionsError()
    extensions = config["extensions"]
    if not isinstance(extensions, Mapping):
        raise ExtensionsNotAMapError()

    # with several health_check extensions, the first one configured wins
    for name in health_checks:
        if name in extensions:
            return _probe_from_extension(extensions[name])
    raise NoExtensionHealthCheckError()


def _probe_from_extension(extension: Any) -> Probe:
    if not isinstance(extension, Mapping):
        return Probe(HTTPGetAction(DEFAULT_HEALTH_CHECK_PATH, DEFAULT_HEALTH_CHECK_PORT))
    return Probe(HTTPGetAction(_path(extension), _port(extension)))


def _path(extension: Mapping[Any, Any]) -> str:
    path = extension.get("path")
    return path if isinstance(path, str) else DEFAULT_HEALTH_CHECK_PATH


def _port(extension: Mapping[Any, Any]) -> int | str:
    endpoint = extension.get("endpoint")
    if not isinstance(endpoint, str):
        return DEFAULT_HEALTH_CHECK_PORT
    components = endpoint.split(":")
    if len(components) != 2:
        return DEFAULT_HEALTH_CHECK_PORT
    port = components[1]
    return int(port) if _INTEGER.fullmatch(port) else port