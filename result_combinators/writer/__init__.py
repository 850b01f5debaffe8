"""
Writer
======

Result + accumulated log, the carrier of the *_w combinators:
- WriterResult[T, E, Log[W]] pairs a step's Result with its log
- Log[W] merges monoidally, in the order the steps ran
"""

from .log import Log
from .result import WriterResult, tell, writer_error, writer_ok

__all__ = (
    "Log",
    "WriterResult",
    "writer_ok",
    "writer_error",
    "tell",
)
