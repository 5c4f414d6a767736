# Copyright (c)
# SPDX-License-Identifier: MIT
"""Transport package.

Purpose:
    * base: the ``Transport`` protocol every query executes against.
    * httpx_transport: the default httpx-backed implementation.
"""

from __future__ import annotations

from .base import Transport
from .httpx_transport import HttpxTransport, redact_api_key

__all__ = ["HttpxTransport", "Transport", "redact_api_key"]
