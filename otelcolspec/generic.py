"""Receiver parser for receivers that expose a single endpoint, with defaults."""

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

GENERIC_PARSER_NAME = "__generic"


class GenericReceiver(ReceiverParser):
    """Parser for receivers whose only port is their ``endpoint``."""

    def __init__(
        self,
        name: str,
        config: Mapping[Any, Any],
        *,
        default_port: int = 0,
        default_protocol: TransportProtocol | None = None,
        default_app_protocol: str | None = None,
        parser_name: str = GENERIC_PARSER_NAME,
    ) -> None:
        self.name = name
        self.config = config
        self.default_port = default_port
        self.default_protocol = default_protocol
        self.default_app_protocol = default_app_protocol
        self._parser_name = parser_name

    def ports(self) -> list[ServicePort]:
        """Return the endpoint's port, or the default port when there is one."""
        port = single_port_from_config_endpoint(self.name, self.config)
        if port is not None:
            return [
                dataclasses.replace(
                    port,
                    protocol=self.default_protocol,
                    app_protocol=self.default_app_protocol,
                )
            ]

        if self.default_port > 0:
            return [
                ServicePort(
                    name=port_name(self.name, self.default_port),
                    port=self.default_port,
                    protocol=self.default_protocol,
                    app_protocol=self.default_app_protocol,
                )
            ]
        return []

    def parser_name(self) -> str:
        return self._parser_name


def generic_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for a receiver without a dedicated parser."""
    return GenericReceiver(name, config)


def awsxray_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for AWS X-Ray receivers."""
    return GenericReceiver(name, config, default_port=2000, parser_name="__awsxray")


def carbon_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for Carbon receivers."""
    return GenericReceiver(name, config, default_port=2003, parser_name="__carbon")


def collectd_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for Collectd receivers."""
    return GenericReceiver(name, config, default_port=8081, parser_name="__collectd")


def fluentforward_receiver_parser(
    name: str, config: Mapping[Any, Any]
) -> ReceiverParser:
    """Build a parser for Fluent Forward receivers."""
    return GenericReceiver(
        name, config, default_port=8006, parser_name="__fluentforward"
    )


def influxdb_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for InfluxDB receivers."""
    return GenericReceiver(name, config, default_port=8086, parser_name="__influxdb")


def opencensus_receiver_parser(
    name: str, config: Mapping[Any, Any]
) -> ReceiverParser:
    """Build a parser for OpenCensus receivers."""
    return GenericReceiver(
        name, config, default_port=55678, parser_name="__opencensus"
    )


def sapm_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for SAPM receivers."""
    return GenericReceiver(name, config, default_port=7276, parser_name="__sapm")


def signalfx_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for SignalFx receivers."""
    return GenericReceiver(name, config, default_port=9943, parser_name="__signalfx")


def splunk_hec_receiver_parser(
    name: str, config: Mapping[Any, Any]
) -> ReceiverParser:
    """Build a parser for Splunk HEC receivers."""
    return GenericReceiver(
        name, config, default_port=8088, parser_name="__splunk_hec"
    )


def statsd_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for StatsD receivers."""
    return GenericReceiver(name, config, default_port=8125, parser_name="__statsd")


def wavefront_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for Wavefront receivers."""
    return GenericReceiver(name, config, default_port=2003, parser_name="__wavefront")


def zipkin_scribe_receiver_parser(
    name: str, config: Mapping[Any, Any]
) -> ReceiverParser:
    """Build a parser for Zipkin Scribe receivers."""
    return GenericReceiver(
        name, config, default_port=9410, parser_name="__zipkinscribe"
    )


def zipkin_receiver_parser(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Build a parser for Zipkin receivers, served over HTTP on TCP."""
    return GenericReceiver(
        name,
        config,
        default_port=9411,
        default_protocol=TransportProtocol.TCP,
        default_app_protocol="http",
        parser_name="__zipkin",
    )