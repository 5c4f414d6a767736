# Copyright (c)
# SPDX-License-Identifier: MIT
"""Tool-invocation shim for agent-driven endpoint discovery and calls."""

from __future__ import annotations

from .catalog import MODULES, EndpointSpec, ModuleSpec
from .schemas import ToolError, ToolRequest, ToolResponse
from .server import (
    ToolServer,
    call_endpoint,
    call_tool,
    get_endpoint_schema,
    list_endpoints,
    list_modules,
    list_tools,
)

__all__ = [
    "MODULES",
    "EndpointSpec",
    "ModuleSpec",
    "ToolError",
    "ToolRequest",
    "ToolResponse",
    "ToolServer",
    "call_endpoint",
    "call_tool",
    "get_endpoint_schema",
    "list_endpoints",
    "list_modules",
    "list_tools",
]
