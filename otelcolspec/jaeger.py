"""Receiver parser for Jaeger receivers and their per-protocol ports."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from otelcolspec.receiver import (
    ReceiverParser,
    ServicePort,
    TransportProtocol,
    port_name,
    single_port_from_config_endpoint,
)

JAEGER_PARSER_NAME = "__jaeger"

DEFAULT_GRPC_PORT = 14250
DEFAULT_THRIFT_HTTP_PORT = 14268
DEFAULT_THRIFT_COMPACT_PORT = 6831
DEFAULT_THRIFT_BINARY_PORT = 6832


@dataclass(frozen=True)
class _Protocol:
    name: str
    default_port: int
    transport: TransportProtocol
    app_protocol: str | None = None


_PROTOCOLS = (
    _Protocol("grpc", DEFAULT_GRPC_PORT, TransportProtocol.TCP, "grpc"),
    _Protocol("thrift_http", DEFAULT_THRIFT_HTTP_PORT, TransportProtocol.TCP, "http"),
    _Protocol("thrift_compact", DEFAULT_THRIFT_COMPACT_PORT, TransportProtocol.UDP),
    _Protocol("thrift_binary", DEFAULT_THRIFT_BINARY_PORT, TransportProtocol.UDP),
)


class JaegerReceiverParser(ReceiverParser):
    """Parser for Jaeger receivers; ``config`` holds the ``protocols`` section."""

    def __init__(self, name: str, config: Mapping[Any, Any]) -> None:
        self.name = name
        self.config = config

    def ports(self) -> list[ServicePort]:
        """Return one port for every protocol that the receiver enables."""
        ports: list[ServicePort] = []
        for protocol in _PROTOCOLS:
            if protocol.name not in self.config:
                continue

            name_with_protocol = f"{self.name}-{protocol.name}"
            settings = self.config[protocol.name]
            port = None
            if isinstance(settings, Mapping):
                port = single_port_from_config_endpoint(name_with_protocol, settings)
            if port is None:
                port = ServicePort(
                    name=port_name(name_with_protocol, protocol.default_port),
                    port=protocol.default_port,
                )

            port = dataclasses.replace(port, protocol=protocol.transport)
            if protocol.app_protocol:
                port = dataclasses.replace(port, app_protocol=protocol.app_protocol)
            ports.append(port)
        return ports

    def parser_name(self) -> str:
        return JAEGER_PARSER_NAME


def jaeger_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for Jaeger receivers."""
    protocols = config.get("protocols")
    if isinstance(protocols, Mapping):
        return JaegerReceiverParser(name, protocols)
    return JaegerReceiverParser(name, {})