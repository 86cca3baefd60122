"""Receiver parser for OTLP receivers and their gRPC and HTTP ports."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from otelcolspec.receiver import (
    ReceiverParser,
    ServicePort,
    TransportProtocol,
    port_name,
    single_port_from_config_endpoint,
)

OTLP_PARSER_NAME = "__otlp"

DEFAULT_OTLP_GRPC_PORT = 4317
DEFAULT_OTLP_HTTP_LEGACY_PORT = 55681
DEFAULT_OTLP_HTTP_PORT = 4318

_GRPC = "grpc"
_HTTP = "http"


class OTLPReceiverParser(ReceiverParser):
    """Parser for OTLP receivers; ``config`` holds the ``protocols`` section."""

    def __init__(self, name: str, config: Mapping[Any, Any]) -> None:
        self.name = name
        self.config = config

    def _default_ports(self, protocol: str) -> list[ServicePort]:
        if protocol == _GRPC:
            return [
                ServicePort(
                    name=port_name(f"{self.name}-grpc", DEFAULT_OTLP_GRPC_PORT),
                    port=DEFAULT_OTLP_GRPC_PORT,
                    target_port=DEFAULT_OTLP_GRPC_PORT,
                    app_protocol=_GRPC,
                )
            ]
        return [
            ServicePort(
                name=port_name(f"{self.name}-http", DEFAULT_OTLP_HTTP_PORT),
                port=DEFAULT_OTLP_HTTP_PORT,
                target_port=DEFAULT_OTLP_HTTP_PORT,
                app_protocol=_HTTP,
            ),
            ServicePort(
                name=port_name(
                    f"{self.name}-http-legacy", DEFAULT_OTLP_HTTP_LEGACY_PORT
                ),
                port=DEFAULT_OTLP_HTTP_LEGACY_PORT,
                # the legacy port targets the official one
                target_port=DEFAULT_OTLP_HTTP_PORT,
                app_protocol=_HTTP,
            ),
        ]

    def ports(self) -> list[ServicePort]:
        """Return the ports of every protocol that the receiver enables."""
        ports: list[ServicePort] = []
        for protocol in (_GRPC, _HTTP):
            if protocol not in self.config:
                continue

            settings = self.config[protocol]
            port = None
            if isinstance(settings, Mapping):
                port = single_port_from_config_endpoint(
                    f"{self.name}-{protocol}", settings
                )

            if port is None:
                ports.extend(self._default_ports(protocol))
            else:
                ports.append(
                    dataclasses.replace(
                        port, protocol=TransportProtocol.TCP, app_protocol=protocol
                    )
                )
        return ports

    def parser_name(self) -> str:
        return OTLP_PARSER_NAME


def otlp_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for OTLP receivers."""
    protocols = config.get("protocols")
    if isinstance(protocols, Mapping):
        return OTLPReceiverParser(name, protocols)
    return OTLPReceiverParser(name, {})