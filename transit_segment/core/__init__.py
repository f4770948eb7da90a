"""
Core 설정 및 utilities, 커스텀 예외
"""

from transit_segment.core.config import settings

from transit_segment.core.exceptions import (
    TransitSegmentException,
    UnknownLineException,
    UnknownStationException,
    InsufficientTokensException,
    DataSourceException,
)

__all__ = [
    "settings",
    "TransitSegmentException",
    "UnknownLineException",
    "UnknownStationException",
    "InsufficientTokensException",
    "DataSourceException",
]
