# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .authorize_token import AuthorizeTokenUseCase
from .login_user import LoginUserUseCase
from .register_user import RegisterUserUseCase

__all__ = ["AuthorizeTokenUseCase", "LoginUserUseCase", "RegisterUserUseCase"]
