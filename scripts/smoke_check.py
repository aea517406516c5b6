#!/usr/bin/env python3
"""
Sinem's Amazing Web App - Deployment Smoke Check

This script verifies that a running server answers the way it should:
- GET on the root path
- GET on an arbitrary nested path with a query string
- POST with a request body, which must not be echoed back

Each check expects status 200, Content-Type text/plain and the exact greeting.

Usage: python scripts/smoke_check.py [--url http://host:port] [--timeout 10]

Requires requests, installed with the "scripts" extra: pip install -e ".[scripts]"
"""

import argparse
import os
import sys
from typing import List, Optional, Tuple

import requests

EXPECTED_BODY = "Welcome to Sinem's Amazing Web App!\n"
EXPECTED_CONTENT_TYPE = "text/plain"

CHECKS: List[Tuple[str, str, Optional[bytes]]] = [
    ("GET", "/", None),
    ("GET", "/anything/at/all?x=1", None),
    ("POST", "/", b"this body is ignored"),
]


def check_endpoint(
    base_url: str, method: str, path: str, body: Optional[bytes] = None, timeout: float = 10
) -> Optional[str]:
    """
    Send one request and compare the answer with the greeting.

    Returns:
        None if the response matches, otherwise a description of the mismatch
    """
    url = base_url.rstrip("/") + path
    try:
        response = requests.request(method, url, data=body, timeout=timeout)
    except requests.RequestException as e:
        return f"request failed: {e}"

    if response.status_code != 200:
        return f"expected status 200, got {response.status_code}"

    content_type = response.headers.get("Content-Type")
    if content_type != EXPECTED_CONTENT_TYPE:
        return f"expected Content-Type {EXPECTED_CONTENT_TYPE!r}, got {content_type!r}"

    if response.content != EXPECTED_BODY.encode("utf-8"):
        return f"unexpected body: {response.content!r}"

    return None


def run_checks(base_url: str, timeout: float = 10) -> bool:
    """Run every check against the server and report each result."""
    print(f"🔍 Checking {base_url}...")

    all_passed = True
    for method, path, body in CHECKS:
        problem = check_endpoint(base_url, method, path, body, timeout)
        if problem:
            print(f"❌ {method} {path}: {problem}")
            all_passed = False
        else:
            print(f"✅ {method} {path}")

    return all_passed


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI interface."""
    default_url = f"http://127.0.0.1:{os.getenv('PORT', '3333')}"

    parser = argparse.ArgumentParser(
        description="Smoke check for Sinem's Amazing Web App"
    )
    parser.add_argument(
        "--url", default=default_url, help=f"Server base URL (default: {default_url})"
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10,
        help="Per-request timeout in seconds (default: 10)",
    )
    args = parser.parse_args(argv)

    if run_checks(args.url, args.timeout):
        print("\n🎉 All checks passed")
        return 0

    print("\n❌ Smoke check failed")
    return 1


if __name__ == "__main__":
    sys.exit(main())
