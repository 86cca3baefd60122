"""Service ports, liveness probes and annotations from OpenTelemetry Collector configurations."""

__version__ = "0.1.0"