"""
Smoke Test Script for Health Check Aggregator
Hits every route of a running server and checks the response shapes.

Usage: python smoke_api.py
"""

import json
import os
from typing import Any

import requests

BASE_URL = os.getenv("HEALTHCHECK_BASE_URL", "http://127.0.0.1:8000/monitoring")


def print_header(title: str) -> None:
    """Print a formatted header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_result(name: str, success: bool, response: Any = None) -> None:
    """Print test result."""
    status = "✓ PASS" if success else "✗ FAIL"
    print(f"\n{status} - {name}")
    if response:
        if isinstance(response, (dict, list)):
            print(json.dumps(response, indent=2, default=str)[:500])
        else:
            print(str(response)[:500])


def check_liveness() -> bool:
    """Liveness probe returns {"status": "ok"}."""
    try:
        response = requests.get(f"{BASE_URL}/health_check")
        success = response.status_code == 200 and response.json() == {"status": "ok"}
        print_result("Liveness", success, response.json())
        return success
    except Exception as e:
        print_result("Liveness", False, str(e))
        return False


def check_environment() -> bool:
    """Environment route returns application and stack metadata."""
    try:
        response = requests.get(f"{BASE_URL}/environment")
        body = response.json()
        success = response.status_code == 200 and {"application", "stack", "platform"} <= set(body)
        print_result("Environment", success, body)
        return success
    except Exception as e:
        print_result("Environment", False, str(e))
        return False


def check_report(path: str, name: str) -> bool:
    """Report routes return a list of {check: status, "time": ms} entries."""
    try:
        response = requests.get(f"{BASE_URL}{path}")
        if response.status_code == 404:
            print_result(name, True, "not configured (404)")
            return True
        document = response.json()
        success = response.status_code == 200 and isinstance(document, list)
        for entry in document:
            names = [key for key in entry if key != "time"]
            status = entry[names[0]] if len(names) == 1 else {}
            if not isinstance(entry.get("time"), (int, float)) or status.get("status") not in ("ok", "error"):
                success = False
            if status.get("status") == "error" and not status.get("message"):
                success = False
        print_result(name, success, document)
        return success
    except Exception as e:
        print_result(name, False, str(e))
        return False


def check_not_found() -> bool:
    """Unknown paths return a plain 404."""
    try:
        response = requests.get(f"{BASE_URL}/definitely-not-a-route")
        success = response.status_code == 404 and response.text == "not found"
        print_result("Not Found", success, response.text)
        return success
    except Exception as e:
        print_result("Not Found", False, str(e))
        return False


def main():
    print("\n" + "=" * 60)
    print("  HEALTH CHECK AGGREGATOR - SMOKE TEST")
    print("=" * 60)
    print(f"  Base URL: {BASE_URL}")

    checks = [
        ("TEST 1: Liveness", check_liveness),
        ("TEST 2: Environment", check_environment),
        ("TEST 3: Default Checks", lambda: check_report("/", "Default Checks")),
        ("TEST 4: Functional Checks", lambda: check_report("/functional", "Functional Checks")),
        ("TEST 5: Not Found", check_not_found),
    ]

    results = {"passed": 0, "failed": 0}
    for title, run in checks:
        print_header(title)
        if run():
            results["passed"] += 1
        else:
            results["failed"] += 1

    # Summary
    print("\n" + "=" * 60)
    print("  TEST SUMMARY")
    print("=" * 60)
    print(f"\n  ✓ Passed: {results['passed']}")
    print(f"  ✗ Failed: {results['failed']}")
    print(f"  Total:   {results['passed'] + results['failed']}")
    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
