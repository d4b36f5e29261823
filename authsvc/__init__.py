# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Register, log in and authorize users with stateless HS256 bearer tokens."""

__version__ = "0.1.0"
