"""Annotations for the collector's workload and pod template."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping

CONFIG_SHA256_ANNOTATION = "opentelemetry-operator-config/sha256"

_DEFAULT_PROMETHEUS_ANNOTATIONS = {
    "prometheus.io/scrape": "true",
    "prometheus.io/port": "8888",
    "prometheus.io/path": "/metrics",
}


def config_sha256(config: str) -> str:
    """Return the hex SHA-256 digest of the collector configuration."""
    return hashlib.sha256(config.encode("utf-8")).hexdigest()


def annotations(
    instance_annotations: Mapping[str, str] | None, config: str
) -> dict[str, str]:
    """Return the annotations for the collector's workload.

    Prometheus scrape annotations are set by default and may be overridden by
    the instance's own annotations; the configuration digest is always set.
    """
    result = dict(_DEFAULT_PROMETHEUS_ANNOTATIONS)
    if instance_annotations:
        result.update(instance_annotations)
    result[CONFIG_SHA256_ANNOTATION] = config_sha256(config)
    return result


def pod_annotations(
    instance_pod_annotations: Mapping[str, str] | None, config: str
) -> dict[str, str]:
    """Return the annotations for the collector's pod template."""
    result = dict(instance_pod_annotations or {})
    result[CONFIG_SHA256_ANNOTATION] = config_sha256(config)
    return result