"""Console adapter - the standard output sink.

Contents:
    * :mod:`.sink` - StandardOutputSink and its factory
"""

from __future__ import annotations

from .sink import StandardOutputSink, create_output_sink

__all__ = [
    "StandardOutputSink",
    "create_output_sink",
]
