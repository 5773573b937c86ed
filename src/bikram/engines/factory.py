"""
bikram.engines.factory
----------------------
Transforms pure data specifications into live Converter objects.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.types import CalendarSpec
from .converter import Converter
from .table import CalendarTable, load_table

log = logging.getLogger(__name__)


def make_converter(spec: CalendarSpec, *, table: Optional[CalendarTable] = None) -> Converter:
    """
    The universal entry point.

    ``table`` overrides the spec's table source (e.g. a short synthetic table
    in tests).
    """
    if table is None:
        table = load_table(spec.table_path)
    conv = Converter(id=spec.id, table=table, anchor=spec.anchor)
    log.debug("Built converter %s over %r", spec.id.name, table)
    return conv
