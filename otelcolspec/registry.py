"""Registry of receiver parser builders, keyed by receiver type."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from otelcolspec import generic
from otelcolspec.jaeger import jaeger_receiver_parser
from otelcolspec.otlp import otlp_receiver_parser
from otelcolspec.receiver import ReceiverParser, receiver_type

Builder = Callable[[str, Mapping[Any, Any]], ReceiverParser]

_registry: dict[str, Builder] = {
    "awsxray": generic.awsxray_receiver_parser,
    "carbon": generic.carbon_receiver_parser,
    "collectd": generic.collectd_receiver_parser,
    "fluentforward": generic.fluentforward_receiver_parser,
    "influxdb": generic.influxdb_receiver_parser,
    "opencensus": generic.opencensus_receiver_parser,
    "sapm": generic.sapm_receiver_parser,
    "signalfx": generic.signalfx_receiver_parser,
    "splunk_hec": generic.splunk_hec_receiver_parser,
    "statsd": generic.statsd_receiver_parser,
    "wavefront": generic.wavefront_receiver_parser,
    "zipkin-scribe": generic.zipkin_scribe_receiver_parser,
    "zipkin": generic.zipkin_receiver_parser,
    "jaeger": jaeger_receiver_parser,
    "otlp": otlp_receiver_parser,
}


def register(name: str, builder: Builder) -> None:
    """Add or replace the parser builder for a receiver type."""
    _registry[name] = builder


def is_registered(name: str) -> bool:
    """Tell whether a parser builder is registered under the given name."""
    return name in _registry


def builder_for(name: str) -> Builder:
    """Return the builder for the receiver's type, or the generic one."""
    return _registry.get(receiver_type(name), generic.generic_receiver_parser)


def parser_for(name: str, config: Mapping[Any, Any]) -> ReceiverParser:
    """Return a new parser for the given receiver name and configuration."""
    return builder_for(name)(name, config)