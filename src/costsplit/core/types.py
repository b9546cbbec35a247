"""Type aliases used across CostSplit."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
RawRow = list[str]
Record = dict[str, str]
