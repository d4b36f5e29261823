# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from authsvc.domain.users.repositories import Clock


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now(UTC)
