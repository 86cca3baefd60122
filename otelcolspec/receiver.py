"""Receiver parser primitives: service ports, port naming and endpoint parsing."""

from __future__ import annotations

import enum
import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# DNS_LABEL constraints for port names.
_DNS_LABEL = re.compile(r"(([A-Za-z0-9][-A-Za-z0-9_.]*)?[A-Za-z0-9])?")
_PORT_IN_ENDPOINT = re.compile(r":[0-9]+")

_MAX_PORT_NAME_LENGTH = 63
_INT32_MAX = 2**31 - 1

_ENDPOINT_KEY = "endpoint"
_LISTEN_ADDRESS_KEY = "listen_address"


class TransportProtocol(str, enum.Enum):
    """Transport protocol of a service port."""

    TCP = "TCP"
    UDP = "UDP"
    SCTP = "SCTP"


@dataclass(frozen=True)
class ServicePort:
    """A port that a service exposes for a receiver."""

    name: str
    port: int
    protocol: TransportProtocol | None = None
    app_protocol: str | None = None
    target_port: int | str | None = None


class ReceiverParser(ABC):
    """Derives service ports from one receiver's configuration."""

    @abstractmethod
    def ports(self) -> list[ServicePort]:
        """Return the service ports based on the receiver's configuration."""

    @abstractmethod
    def parser_name(self) -> str:
        """Return the name of this parser."""


def port_name(receiver_name: str, port: int) -> str:
    """Return a DNS-label-safe port name for the receiver, or ``port-<n>``."""
    if len(receiver_name.encode("utf-8")) > _MAX_PORT_NAME_LENGTH:
        return f"port-{port}"

    candidate = receiver_name.replace("/", "-").replace("_", "-")
    if not _DNS_LABEL.fullmatch(candidate):
        return f"port-{port}"
    return candidate


def port_from_endpoint(endpoint: str) -> int:
    """Extract the port number from an endpoint such as ``0.0.0.0:1234``.

    Raises ValueError when there is no usable port.
    """
    port = 0
    match = _PORT_IN_ENDPOINT.search(endpoint)
    if match:
        port = int(match.group()[1:])
        if port > _INT32_MAX:
            raise ValueError(f"port {port} in endpoint {endpoint!r} is out of range")
    if port == 0:
        raise ValueError("Port should not be empty")
    return port


def receiver_type(name: str) -> str:
    """Return the receiver type: the part of the name before any ``/``."""
    return name.split("/", 1)[0]


def _address_from_config(name: str, key: str, config: Mapping[Any, Any]) -> Any:
    if key not in config:
        logger.debug("%s receiver doesn't have an %s", name, key)
        return None
    return config[key]


def _section(name: str, section: str, value: Any) -> Mapping[Any, Any]:
    if not isinstance(value, Mapping):
        raise TypeError(f"{name} receiver's {section} section isn't a map")
    return value


def single_port_from_config_endpoint(
    name: str, config: Mapping[Any, Any]
) -> ServicePort | None:
    """Build a service port from the endpoint in the receiver's configuration.

    Returns None when the receiver exposes no endpoint or it can't be parsed.
    """
    endpoint: Any = None
    if name == "syslog":
        # the endpoint sits one level down, in the udp or tcp section
        if config.get("udp") is not None:
            section = _section(name, "udp", config["udp"])
            endpoint = _address_from_config(name, _LISTEN_ADDRESS_KEY, section)
        elif config.get("tcp") is not None:
            section = _section(name, "tcp", config["tcp"])
            endpoint = _address_from_config(name, _LISTEN_ADDRESS_KEY, section)
    elif name in ("tcplog", "udplog"):
        endpoint = _address_from_config(name, _LISTEN_ADDRESS_KEY, config)
    elif name == "kubeletstats":
        # a scraper: nothing to expose through a service
        return None
    else:
        endpoint = _address_from_config(name, _ENDPOINT_KEY, config)

    if not isinstance(endpoint, str):
        logger.info("receiver's endpoint isn't a string")
        return None

    try:
        port = port_from_endpoint(endpoint)
    except ValueError:
        logger.info("couldn't parse the endpoint's port: %s", endpoint)
        return None
    return ServicePort(name=port_name(name, port), port=port)