# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

SUCCESS_MESSAGE = "user registered successfully"


@dataclass(slots=True, frozen=True)
class Account:
    """User record returned by the account-creation service."""

    id: int
    name: str
    email: str
    role: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Account:
        missing = [key for key in ("id", "name", "email", "role") if key not in payload]
        if missing:
            raise ValueError(f"account payload missing fields: {', '.join(missing)}")
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            email=str(payload["email"]),
            role=str(payload["role"]),
        )

    def to_payload(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email, "role": self.role}


@dataclass(slots=True, frozen=True)
class SubscriptionReceipt:

    message: str


@dataclass(slots=True, frozen=True)
class RegistrationRequest:

    name: str
    email: str


@dataclass(slots=True, frozen=True)
class RegistrationResult:

    message: str = SUCCESS_MESSAGE
