#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import time

from bor.heimdall import HeimdallClient, ShutdownDetectedError
from bor.heimdall.config import DEFAULT_HEIMDALL_URL

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Poll Heimdall for checkpoints, milestones and state sync events")
    p.add_argument("url", nargs="?", default=DEFAULT_HEIMDALL_URL)
    p.add_argument("--span", type=int, default=None, help="Also fetch this span id")
    p.add_argument("--from-id", type=int, default=None, help="Also fetch state sync events from this id")
    p.add_argument("--timeout", type=float, default=30.0, help="Deadline per call in seconds")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    client = HeimdallClient(args.url)
    try:
        checkpoint = await client.fetch_checkpoint(timeout=args.timeout)
        count = await client.fetch_checkpoint_count(timeout=args.timeout)
        if checkpoint is not None:
            print(f"Checkpoint #{count}: blocks {checkpoint.start_block}-{checkpoint.end_block} root {checkpoint.root_hash}")

        milestone = await client.fetch_milestone(timeout=args.timeout)
        count = await client.fetch_milestone_count(timeout=args.timeout)
        if milestone is not None:
            print(f"Milestone #{count}: blocks {milestone.start_block}-{milestone.end_block} hash {milestone.hash}")

        if args.span is not None:
            span = await client.span(args.span, timeout=args.timeout)
            if span is not None:
                producers = ", ".join(v.signer for v in span.selected_producers)
                print(f"Span {span.id}: blocks {span.start_block}-{span.end_block} producers [{producers}]")

        if args.from_id is not None:
            events = await client.state_sync_events(args.from_id, int(time.time()), timeout=args.timeout)
            print(f"State sync events from {args.from_id} - showing {len(events)}:")
            print(f"{'ID':>8} | {'Record Time':25} | {'Contract':42}")
            print("-" * 82)
            for e in events:
                print(f"{e.id:>8} | {e.record_time.isoformat():25} | {e.contract:42}")
    except TimeoutError:
        print(f"Heimdall did not answer within {args.timeout:g}s")
    except ShutdownDetectedError:
        print("Client closed while polling")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
