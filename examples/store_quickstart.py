#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from lowfat.store import ContentStore, InMemoryStore, StoreConfig
from lowfat.store.backends import DynamoDBStore


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Quickstart for ContentStore reads and traversals")
    p.add_argument("type", nargs="?", default="dog-update")
    p.add_argument("--dynamodb", action="store_true", help="Read from DynamoDB instead of memory")
    p.add_argument("--filter", default=None, help="Filter expression, e.g. 'IID:id2.47'")
    p.add_argument("--throttle", type=int, default=250, help="Milliseconds between pages")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


def seeded_backend(type_: str) -> InMemoryStore:
    backend = InMemoryStore()
    backend.load(
        brief=[
            {"Type": type_, "IID": "id1.45", "TS": 1501000000000},
            {"Type": type_, "IID": "id2.47", "TS": 1501863044192},
            {"Type": type_, "IID": "id2.48", "TS": 1501949438656},
            {"Type": type_, "IID": "id2.43", "TS": 1502200000000},
        ],
        content=[{"ID": "list#recent", "Data": {"Type": "list", type_: ["id2.43", "id2.48"]}}],
    )
    return backend


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    backend = DynamoDBStore(StoreConfig.from_env()) if args.dynamodb else seeded_backend(args.type)
    async with ContentStore(backend) as store:
        window = await store.query_by_type_ts(
            args.type,
            {"startDate": "2017-08-05", "endDate": "2017-08-09", "filter": args.filter},
        )
        print("TS window:", [item["IID"] for item in window.items])

        listed = await store.get_list(args.type, {"list": "list#recent", "filter": args.filter})
        print("List:", [item["IID"] for item in listed.items])

        # Pages of two, spaced by the throttle
        traversal = store.query_by_type(
            args.type, {"pageSize": 2, "throttle": args.throttle, "filter": args.filter}
        )
        async for item in traversal:
            print(f"ITEM {item['IID']} | TS={item.get('TS')}")


if __name__ == "__main__":
    asyncio.run(main())
