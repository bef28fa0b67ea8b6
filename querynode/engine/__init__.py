"""Query engine: classify → bind → execute → shape."""

from .classifier import classify
from .errors import (
    ArgumentParseError,
    InvalidRequestError,
    ItemFailedError,
    QueryExecutionError,
    QueryNodeError,
)
from .types import OutputRecord, QueryType, Request

__all__ = [
    "ArgumentParseError",
    "InvalidRequestError",
    "ItemFailedError",
    "OutputRecord",
    "QueryExecutionError",
    "QueryNodeError",
    "QueryType",
    "Request",
    "classify",
]
