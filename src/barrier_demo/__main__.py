"""
Entry point for the terminal demo.

Usage:
    python -m barrier_demo

Configuration comes from BARRIER_DEMO_* environment variables, e.g.
    BARRIER_DEMO_RATE_MS=50 python -m barrier_demo
"""

import asyncio

from barrier_demo.tui import DemoController


async def main() -> None:
    """Run the demo controller."""
    controller = DemoController()
    await controller.run()


if __name__ == "__main__":
    asyncio.run(main())
