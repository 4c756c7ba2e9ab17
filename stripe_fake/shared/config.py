from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    id_prefix: str
    default_currency: str
    default_plan_amount: int
    default_plan_interval: str


def get_settings() -> Settings:
    return Settings(
        id_prefix=_env("STRIPE_FAKE_ID_PREFIX", "test_"),
        default_currency=_env("STRIPE_FAKE_DEFAULT_CURRENCY", "usd"),
        default_plan_amount=int(_env("STRIPE_FAKE_PLAN_AMOUNT", "1337")),
        default_plan_interval=_env("STRIPE_FAKE_PLAN_INTERVAL", "month"),
    )
