from __future__ import annotations
from .core.engine import CalendarRegistry
from .engines.specs import ALL_SPECS
from .engines.factory import make_converter

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_converter(spec)
    return CalendarRegistry(calendars)
