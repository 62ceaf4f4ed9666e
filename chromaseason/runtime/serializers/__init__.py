# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Serializers for analysis storage and display.

Records keep the numbers only; summaries add labels and the season.
Neither modifies the values they carry.
"""

from chromaseason.runtime.serializers.base import SerializerFormat, dump_json
from chromaseason.runtime.serializers.record import from_record, to_record
from chromaseason.runtime.serializers.summary import to_summary

__all__ = [
    "SerializerFormat",
    "dump_json",
    "to_record",
    "from_record",
    "to_summary",
]
