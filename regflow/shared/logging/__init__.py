# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig


from .events import (
    EventLogger,
    StructuredLogger,
    event_logger,
    render_details,
    render_event,
)
from .logger import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
    setup_logging,
)

__all__ = [
    "EventLogger",
    "StructuredLogger",
    "clear_correlation_id",
    "event_logger",
    "get_correlation_id",
    "logger",
    "render_details",
    "render_event",
    "set_correlation_id",
    "setup_logging",
]
