"""Decorator marking functions as MCP tools."""

import functools
from typing import Callable, Optional

TOOL_PREFIX = "solr_"


def _tool_name(func_name: str) -> str:
    name = func_name
    if name.startswith("execute_"):
        name = name[len("execute_"):]
    if name.endswith("_query"):
        name = name[: -len("_query")]
    return name if name.startswith(TOOL_PREFIX) else f"{TOOL_PREFIX}{name}"


def tool(name: Optional[str] = None) -> Callable:
    """Mark an async function as a tool.

    The tool name defaults to the function name without its ``execute_``
    prefix and ``_query`` suffix, prefixed with ``solr_``. The first
    parameter of a tool receives the server instance.
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            return await func(*args, **kwargs)

        wrapper._is_tool = True
        wrapper._tool_name = name or _tool_name(func.__name__)
        wrapper._tool_description = (func.__doc__ or "").strip().split("\n")[0]
        return wrapper

    return decorator
