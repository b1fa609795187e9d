"""Parameter and row aliases shared by the `Database` adapter, dialects, and row mapper."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

# Placeholder name -> value, as passed to `SqlExecutor`.
NamedParams = Dict[str, Any]
# What a dialect hands to the driver after compiling `:NAME` placeholders.
QueryParams = Union[NamedParams, List[Any], None]

RowMapping = Mapping[str, Any]
Rows = List[RowMapping]
MaybeRow = Optional[RowMapping]
