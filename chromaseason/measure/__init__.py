# Copyright (c) 2026 Chromaseason
# SPDX-License-Identifier: MIT

"""
Measurement core for Chromaseason.

Deterministic conversion of sampled colors into dimension positions and
composite scores. All operations are pure functions of their inputs.
"""

from chromaseason.measure.analyze import analyze

__all__ = ["analyze"]
