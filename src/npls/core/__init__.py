"""Core / service layer — pipeline orchestration and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem access and no direct subprocess calls.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from npls.core.formatter import format_listing
from npls.core.listing_service import ListingService
from npls.core.models import InvocationResult, StreamMode, StreamRouting
from npls.core.protocols import CommandRunner

__all__: list[str] = [
    "CommandRunner",
    "InvocationResult",
    "ListingService",
    "StreamMode",
    "StreamRouting",
    "format_listing",
]
