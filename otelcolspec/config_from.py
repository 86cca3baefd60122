"""Loading of collector configuration documents."""

from __future__ import annotations

from typing import Any

import yaml


class InvalidYAMLError(ValueError):
    """The collector configuration is not a valid YAML mapping."""

    def __init__(self) -> None:
        super().__init__("couldn't parse the opentelemetry-collector configuration")


def config_from_string(config_str: str) -> dict[Any, Any]:
    """Parse a YAML collector configuration into a mapping.

    An empty document gives an empty mapping; anything that is not a mapping
    raises InvalidYAMLError.
    """
    try:
        data = yaml.safe_load(config_str)
    except yaml.YAMLError as err:
        raise InvalidYAMLError() from err

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidYAMLError()
    return data