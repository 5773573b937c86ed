from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import DayInfo
from ..core.time import to_jdn

# Attribute functions receive the day and the converter that produced it.
AttrFunc = Callable[[DayInfo, Any], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def list_attributes() -> list[str]:
    return sorted(_REGISTRY)

def compute_attributes(info: DayInfo, names: Sequence[str], calendar: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](info, calendar))
    return out

# helper for attribute implementations
def jdn(info: DayInfo) -> int:
    return to_jdn(info.gregorian)
