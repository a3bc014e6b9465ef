"""Store configuration.

Values are read from the environment by ``StoreConfig.from_env``:

- ``STORE_PREFIX``: table name prefix, e.g. ``Dev_`` gives ``Dev_Content``
  and ``Dev_Brief``
- ``STORE_REGION``: backend region
- ``DYNAMO_DB_ENDPOINT``: endpoint override for local DynamoDB emulators
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from .core.enums import Family

DEFAULT_PREFIX = "Dev_"
DEFAULT_REGION = "us-east-1"


class StoreConfig(BaseModel):
    table_prefix: str = DEFAULT_PREFIX
    region: str = DEFAULT_REGION
    endpoint_url: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreConfig:
        env = os.environ if environ is None else environ
        return cls(
            table_prefix=env.get("STORE_PREFIX", DEFAULT_PREFIX),
            region=env.get("STORE_REGION", DEFAULT_REGION),
            endpoint_url=env.get("DYNAMO_DB_ENDPOINT") or None,
        )

    def table_name(self, family: Family) -> str:
        return f"{self.table_prefix}{family.table_suffix}"
