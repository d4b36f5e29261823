# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .session import (
    Base,
    create_engine_from_config,
    create_session_factory,
    init_db,
)

__all__ = [
    "Base",
    "create_engine_from_config",
    "create_session_factory",
    "init_db",
]
