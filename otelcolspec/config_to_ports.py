"""Derivation of service ports from the receivers of a collector configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from otelcolspec.receiver import ServicePort
from otelcolspec.registry import parser_for

logger = logging.getLogger(__name__)


class ReceiversConfigError(ValueError):
    """The receivers section of the configuration is unusable."""


class NoReceiversError(ReceiversConfigError):
    """The configuration has no receivers."""

    def __init__(self) -> None:
        super().__init__("no receivers available as part of the configuration")


class ReceiversNotAMapError(ReceiversConfigError):
    """The receivers property isn't a map of receivers."""

    def __init__(self) -> None:
        super().__init__(
            "receivers property in the configuration doesn't contain valid receivers"
        )


def config_to_receiver_ports(config: Mapping[Any, Any]) -> list[ServicePort]:
    """Return the service ports that the configured receivers need.

    A receiver whose parser fails is logged and skipped.
    """
    if "receivers" not in config:
        raise NoReceiversError()
    receivers = config["receivers"]
    if not isinstance(receivers, Mapping):
        raise ReceiversNotAMapError()

    ports: list[ServicePort] = []
    for key, value in receivers.items():
        if not isinstance(key, str):
            raise TypeError(f"receiver name {key!r} isn't a string")
        if not isinstance(value, Mapping):
            logger.info("receiver %s doesn't seem to be a map of properties", key)
            value = {}

        parser = parser_for(key, value)
        try:
            receiver_ports = parser.ports()
        except Exception:
            # one faulty parser shouldn't keep the others from adding their ports
            logger.exception("parser for '%s' has returned an error", key)
            continue
        ports.extend(receiver_ports)
    return ports