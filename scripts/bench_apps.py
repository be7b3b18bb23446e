#!/usr/bin/env python3
"""Benchmark access resolution: latency (p50, p95, p99) and QPS of GET /v1/apps/{id}/users.

Usage:
  Start the API (``portalgate serve``), then:
    export API_URL=http://localhost:8000 BENCH_EMAIL=admin@acme.example
    python scripts/bench_apps.py [--num-users 200] [--num-requests 200]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(api_url: str, email: str, password: str) -> str:
    r = httpx.post(
        f"{api_url}/v1/auth/login",
        json={"email": email, "password": password},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["token"]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark application access listing")
    parser.add_argument("--num-users", type=int, default=100, help="Users to create before measuring")
    parser.add_argument("--num-requests", type=int, default=100, help="Number of /v1/apps requests")
    parser.add_argument("--output", type=str, default="results/bench_apps.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    email = os.environ.get("BENCH_EMAIL", "admin@acme.example")
    password = os.environ.get("BENCH_PASSWORD", "admin123")

    print("Logging in...")
    token = get_token(api_url, email, password)
    headers = {"Authorization": f"Bearer {token}", "Content-Type": "application/json"}

    run_id = int(time.time())
    with httpx.Client(timeout=60.0) as client:
        print(f"Creating {args.num_users} users...")
        for i in range(args.num_users):
            client.post(
                f"{api_url}/v1/users",
                json={
                    "email": f"bench-{run_id}-{i}@acme.example",
                    "first_name": "Bench",
                    "last_name": f"User {i}",
                    "role": "operator",
                    "groups": ["basic-access"],
                },
                headers=headers,
            ).raise_for_status()

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_requests} app listing requests...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for _ in range(args.num_requests):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/apps/market-forecast/users", headers=headers)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful requests.")
        return 1

    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = sorted(latencies)[int(n * 0.99) - 1] * 1000 if n >= 100 else p95

    summary = (
        f"Access benchmark (extra users={args.num_users}, requests={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
