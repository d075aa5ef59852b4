# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""refman CLI package exports."""

from __future__ import annotations

from .app import app

__all__ = ["app"]
