# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for the Dify client.

This module provides the immutable ClientConfig shared read-only by every
request issued through one Transport.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.dify.ai/v1"

API_KEY_ENV = "DIFY_API_KEY"
BASE_URL_ENV = "DIFY_BASE_API"


@dataclass(frozen=True)
class ClientConfig:
    """
    Configuration for a Dify client.

    Immutable after construction. The base URL is used verbatim: endpoint
    paths are appended to it without any slash normalization.
    """

    api_key: str = field(repr=False)
    """API key sent as a bearer token on every request."""

    base_url: str = DEFAULT_BASE_URL
    """Service root, e.g. ``https://api.dify.ai/v1``."""

    timeout: float | None = None
    """Read/write/pool timeout in seconds. None disables the timeout."""

    connect_timeout: float | None = None
    """Connect timeout in seconds. None falls back to ``timeout``."""

    verify: bool = True
    """Verify TLS certificates."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise ConfigurationError("api_key must not be empty")
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout is not None and self.timeout < 0:
            raise ConfigurationError("timeout must be non-negative")
        if self.connect_timeout is not None and self.connect_timeout < 0:
            raise ConfigurationError("connect_timeout must be non-negative")

    @classmethod
    def create(cls, api_key: str, base_url: str | None = None) -> ClientConfig:
        """Build a config from an api key and an optional base URL override."""
        return cls(api_key=api_key, base_url=base_url or DEFAULT_BASE_URL)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """
        Load configuration from environment variables.

        Reads ``DIFY_API_KEY`` (required) and ``DIFY_BASE_API`` (optional).

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Raises:
            ConfigurationError: If ``DIFY_API_KEY`` is missing or empty.
        """
        env = os.environ if environ is None else environ
        api_key = env.get(API_KEY_ENV)
        if not api_key:
            raise ConfigurationError(f"{API_KEY_ENV} is not set")
        return cls.create(api_key, env.get(BASE_URL_ENV))


__all__ = ["API_KEY_ENV", "BASE_URL_ENV", "DEFAULT_BASE_URL", "ClientConfig"]
