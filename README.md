# otelcolspec

Works out the Kubernetes-facing settings that an OpenTelemetry Collector
configuration calls for:

- the **service ports** its receivers listen on,
- the **liveness probe** given by its `health_check` extension,
- the **annotations** for the collector's workload and its pod template,
  including a SHA-256 of the configuration text, so that a configuration
  change rolls the pods.

It is a library: it takes configuration text or mappings and returns plain
Python values.

## Installation

```
pip install otelcolspec
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Loading a configuration

```python
from otelcolspec.config_from import config_from_string

config = config_from_string("receivers:\n  zipkin:\n")
```

`config_from_string` parses YAML into a `dict`. An empty document gives `{}`.
Text that is not valid YAML, or whose top level is not a mapping, raises
`InvalidYAMLError` (a `ValueError`).

## Service ports from receivers

```python
from otelcolspec.config_from import config_from_string
from otelcolspec.config_to_ports import config_to_receiver_ports

config = config_from_string("""
receivers:
  otlp:
    protocols:
      grpc:
      http:
  jaeger/custom:
    protocols:
      thrift_http:
        endpoint: 0.0.0.0:15268
  zipkin:
""")

for port in config_to_receiver_ports(config):
    print(port.name, port.port, port.protocol, port.app_protocol)
```

Each result is a frozen `ServicePort` (from `otelcolspec.receiver`) with
`name`, `port`, `protocol` (a `TransportProtocol`: `TCP`, `UDP` or `SCTP`, or
`None`), `app_protocol` and `target_port`.

Each receiver is handled by the parser registered for its type, which is the
part of the name before any `/` (so `jaeger/custom` uses the Jaeger parser).
Receivers with no registered parser fall back to a generic parser that reads
the port from their `endpoint`. Port names follow the DNS label rules: `/` and
`_` become `-`, and a name longer than 63 bytes or otherwise invalid becomes
`port-<number>`.

Built-in parsers:

| Receiver type   | Default port(s)                          |
|-----------------|------------------------------------------|
| `otlp`          | grpc 4317; http 4318 and legacy 55681    |
| `jaeger`        | grpc 14250, thrift_http 14268, thrift_compact 6831 (UDP), thrift_binary 6832 (UDP) |
| `zipkin`        | 9411 (TCP, app protocol `http`)          |
| `zipkin-scribe` | 9410                                     |
| `opencensus`    | 55678                                    |
| `carbon`        | 2003                                     |
| `wavefront`     | 2003                                     |
| `collectd`      | 8081                                     |
| `sapm`          | 7276                                     |
| `signalfx`      | 9943                                     |
| `fluentforward` | 8006                                     |
| `statsd`        | 8125                                     |
| `influxdb`      | 8086                                     |
| `splunk_hec`    | 8088                                     |
| `awsxray`       | 2000                                     |

For `otlp` and `jaeger`, only the protocols listed under `protocols` get ports;
an `endpoint` in a protocol's settings replaces its default port. For the other
types, an `endpoint` replaces the default port. `syslog` reads `listen_address`
from its `udp` or `tcp` section, `tcplog` and `udplog` read `listen_address`,
and `kubeletstats` is a scraper and gets no port from its endpoint.

`config_to_receiver_ports` raises `NoReceiversError` when there is no
`receivers` section and `ReceiversNotAMapError` when it is not a mapping; both
derive from `ReceiversConfigError`. A receiver whose settings are not a mapping
is treated as having none, and a receiver whose parser raises is logged and
skipped.

The lower-level helpers in `otelcolspec.receiver` are public too:
`port_name(receiver_name, port)`, `port_from_endpoint(endpoint)` (raises
`ValueError` when no port is found), `receiver_type(name)` and
`single_port_from_config_endpoint(name, config)`.

### Custom parsers

```python
from otelcolspec.generic import GenericReceiver
from otelcolspec.registry import parser_for, register

def my_parser(name, config):
    return GenericReceiver(name, config, default_port=9999, parser_name="__mine")

register("myreceiver", my_parser)
print(parser_for("myreceiver/a", {}).ports())
```

A parser is any subclass of `ReceiverParser` providing `ports()` and
`parser_name()`. `register` adds or replaces a builder, `is_registered` checks
for one, and `builder_for` returns the builder that `parser_for` would use.

## Liveness probe

```python
from otelcolspec.config_from import config_from_string
from otelcolspec.config_to_probe import config_to_container_probe

probe = config_to_container_probe(config_from_string("""
extensions:
  health_check:
    endpoint: localhost:1234
    path: /checkit
service:
  extensions: [health_check]
"""))
print(probe.http_get.path, probe.http_get.port)   # /checkit 1234
```

The first entry of `service.extensions` starting with `health_check` that is
also defined under `extensions` is used. Without an endpoint or path, the probe
uses `/` on port 13133. A missing or malformed `service`,
`service.extensions` or `extensions` section, or no matching health check,
raises a subclass of `ProbeConfigError`.

## Annotations

```python
from otelcolspec.annotations import annotations, pod_annotations

annotations({"team": "observability"}, "test")
# {'prometheus.io/scrape': 'true', 'prometheus.io/port': '8888',
#  'prometheus.io/path': '/metrics', 'team': 'observability',
#  'opentelemetry-operator-config/sha256': '9f86d0...'}

pod_annotations({"pod_annotation": "value"}, "test")
# {'pod_annotation': 'value', 'opentelemetry-operator-config/sha256': '9f86d0...'}
```

User annotations may override the Prometheus defaults, but the configuration
hash (`config_sha256`) is always recomputed and set last. The input mappings
are never modified.

## What it does not do

The package does not talk to a Kubernetes cluster and does not build whole
objects such as deployments, daemon sets, containers, services or autoscalers;
it only computes the ports, probe and annotations that such objects would
carry. It has no command-line interface.