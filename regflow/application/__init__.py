# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users.register_user import FAILURE_MESSAGE, RegisterUserUseCase

__all__ = ["FAILURE_MESSAGE", "RegisterUserUseCase"]
