# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Delivery runtime for Chromaseason.

Conversion of analyses into storage records and readable summaries.
"""

from chromaseason.runtime.serializers import (
    SerializerFormat,
    from_record,
    to_record,
    to_summary,
)

__all__ = [
    "SerializerFormat",
    "to_record",
    "from_record",
    "to_summary",
]
