#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from topgg.servers import TopGGScraper


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List the largest top.gg Discord servers")
    p.add_argument("amount", nargs="?", type=int, default=100)
    p.add_argument("--tags", default=None)
    p.add_argument("--query", default=None)
    p.add_argument("--min-members", type=int, default=0)
    p.add_argument("--out", default=None, help="write the results to this JSON file")
    p.add_argument("--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    async with TopGGScraper(timeout=30.0) as scraper:
        servers = await scraper.get_servers(
            args.amount,
            {"tags": args.tags, "query": args.query},
            {
                "simplify": True,
                "sort": True,
                "filter": args.min_members > 0,
                "filterSize": args.min_members,
                "write": args.out is not None,
                "file": args.out,
            },
        )

    print("=" * 65)
    print(f"Servers    : {len(servers)}")
    print("=" * 65)
    print(f"{'ID':20} | {'Members':>10} | Name")
    print("-" * 65)
    for s in servers:
        print(f"{s['_id']:20} | {s['members']:>10} | {s['name']}")
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
