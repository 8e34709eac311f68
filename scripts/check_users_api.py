#!/usr/bin/env python3
"""
Probe the users API once through the data access layer.

Prints where the data came from (remote or mock fallback), the fallback
message if any, and one line per user. Exits 1 when the fallback served.

Usage:
  python scripts/check_users_api.py
  python scripts/check_users_api.py --base-url http://localhost:3000 --timeout 5
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import os
import sys

APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "app"))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from config import configure_logging, get_config  # noqa: E402
from data.service import get_users  # noqa: E402


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--base-url", help="Override USERS_API_BASE_URL")
    ap.add_argument("--timeout", type=float, help="Request timeout in seconds")
    args = ap.parse_args()

    cfg = get_config()
    if args.base_url:
        cfg = dataclasses.replace(cfg, api_base_url=args.base_url)
    if args.timeout is not None:
        cfg = dataclasses.replace(cfg, api_timeout_s=args.timeout)
    configure_logging(cfg)

    res = asyncio.run(get_users(cfg))

    print(f"source: {res.provenance.value} ({cfg.users_url})")
    if res.message:
        print(f"message: {res.message}")
    for user in res.payload:
        print(f"  {user.id:>14}  {user.name:<20} {user.email}")
    return 1 if res.is_fallback else 0


if __name__ == "__main__":
    sys.exit(main())
