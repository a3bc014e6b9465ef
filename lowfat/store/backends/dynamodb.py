"""DynamoDB backing store.

Uses boto3 resource tables. boto3 is blocking, so each call runs in the
default executor via ``asyncio.to_thread`` and the awaiting task is
suspended meanwhile. botocore errors (``ClientError`` with codes such as
``ValidationException``) propagate unmodified.

Table layout:
    ``<prefix>Content``: hash key ``ID``
    ``<prefix>Brief``: hash key ``Type``, range key ``IID``; local secondary
    indexes ``TypeTS`` (range ``TS``) and ``TypeFeatured`` (range
    ``FeatureDate``)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import boto3
from boto3.dynamodb.conditions import Key

from ..config import StoreConfig
from ..core.base import BackingStore
from ..core.enums import Family, IndexName
from ..models.range_query import KeyCondition
from ..models.responses import BatchResponse, Cursor, ItemResponse, Page, PageStats

logger = logging.getLogger(__name__)


def build_key_condition(family: Family, partition: str, condition: KeyCondition | None) -> Any:
    """Translate a partition value and range predicate into a boto3 condition."""
    expression = Key(family.partition_attribute).eq(partition)
    if condition is None:
        return expression
    sort_key = Key(condition.attribute)
    kind = condition.kind
    if kind == "begins_with":
        return expression & sort_key.begins_with(condition.prefix)
    if kind == "between":
        return expression & sort_key.between(condition.lower, condition.upper)
    if kind == "gte":
        return expression & sort_key.gte(condition.lower)
    return expression & sort_key.lte(condition.upper)


class DynamoDBStore(BackingStore):
    """Backing store over two DynamoDB tables."""

    def __init__(self, config: StoreConfig | None = None, *, resource: Any = None) -> None:
        """Initialize the store.

        Args:
            config: Table prefix, region and endpoint; read from the
                environment when omitted
            resource: Pre-built boto3 DynamoDB resource
        """
        self._config = config or StoreConfig.from_env()
        self._resource = resource or boto3.resource(
            "dynamodb",
            region_name=self._config.region,
            endpoint_url=self._config.endpoint_url,
        )
        logger.info(
            "dynamodb_store_configured",
            extra={
                "endpoint_url": self._config.endpoint_url,
                "region": self._config.region,
                "table_prefix": self._config.table_prefix,
            },
        )

    def _table(self, family: Family) -> Any:
        return self._resource.Table(self._config.table_name(family))

    async def get_one(self, family: Family, key: dict[str, str]) -> ItemResponse:
        table = self._table(family)
        logger.debug("dynamodb_get", extra={"table": table.name, "key": key})
        result = await asyncio.to_thread(
            table.get_item, Key=key, ReturnConsumedCapacity="TOTAL"
        )
        return ItemResponse(
            item=result.get("Item"), consumed_capacity=result.get("ConsumedCapacity")
        )

    async def batch_get(self, family: Family, keys: Sequence[dict[str, str]]) -> BatchResponse:
        table_name = self._config.table_name(family)
        logger.debug("dynamodb_batch_get", extra={"table": table_name, "key_count": len(keys)})
        result = await asyncio.to_thread(
            self._resource.batch_get_item,
            RequestItems={table_name: {"Keys": list(keys)}},
            ReturnConsumedCapacity="TOTAL",
        )
        return BatchResponse(
            items=result.get("Responses", {}).get(table_name, []),
            consumed_capacity=result.get("ConsumedCapacity"),
            unprocessed_keys=result.get("UnprocessedKeys"),
        )

    async def paged_scan(
        self,
        family: Family,
        *,
        page_size: int,
        cursor: Cursor | None = None,
    ) -> Page:
        table = self._table(family)
        params: dict[str, Any] = {"Limit": page_size, "ReturnConsumedCapacity": "TOTAL"}
        if cursor:
            params["ExclusiveStartKey"] = cursor
        result = await asyncio.to_thread(table.scan, **params)
        return self._to_page(result)

    async def paged_query(
        self,
        family: Family,
        partition: str,
        *,
        index: IndexName | None = None,
        condition: KeyCondition | None = None,
        page_size: int,
        ascending: bool = True,
        cursor: Cursor | None = None,
    ) -> Page:
        table = self._table(family)
        params: dict[str, Any] = {
            "KeyConditionExpression": build_key_condition(family, partition, condition),
            "Limit": page_size,
            "ScanIndexForward": ascending,
            "ReturnConsumedCapacity": "INDEXES" if index else "TOTAL",
        }
        if index is not None:
            params["IndexName"] = index.value
        if cursor:
            params["ExclusiveStartKey"] = cursor
        logger.debug(
            "dynamodb_query",
            extra={
                "table": table.name,
                "index": index.value if index else None,
                "partition": partition,
                "condition": condition.kind if condition else None,
            },
        )
        result = await asyncio.to_thread(table.query, **params)
        return self._to_page(result)

    @staticmethod
    def _to_page(result: dict[str, Any]) -> Page:
        return Page(
            items=result.get("Items", []),
            next_cursor=result.get("LastEvaluatedKey"),
            stats=PageStats(
                count=result.get("Count", 0),
                scanned_count=result.get("ScannedCount", 0),
                consumed_capacity=result.get("ConsumedCapacity"),
            ),
        )
