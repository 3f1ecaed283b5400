#!/usr/bin/env python3
"""
Seed script: creates a demo user and sample items via the API (no direct DB).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --items-per-category 20 --base-url http://localhost:8032
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8032"

DESCRIPTIONS = {
    "Steel": ["TMT bar 8mm", "TMT bar 10mm", "TMT bar 12mm", "Binding wire", "MS angle 40x40"],
    "Sand": ["River sand (ton)", "M-sand (ton)", "Plastering sand (ton)", "Filling sand (tractor)"],
    "Tapi": ["Tapi 10 ft", "Tapi 12 ft", "Centering sheet", "Wooden plank"],
    "Cement": ["OPC 53 grade bag", "PPC bag", "White cement 5kg", "Ready mix bag"],
}


def random_price() -> float:
    return round(random.uniform(50, 5000), 2)


def main():
    ap = argparse.ArgumentParser(description="Seed a demo user and items via API")
    ap.add_argument("--items-per-category", type=int, default=5, help="Items per category")
    ap.add_argument("--username", default="demo", help="Demo username")
    ap.add_argument("--password", default="demo123", help="Demo password")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created_items = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        r = client.post("/signup", json={"username": args.username, "password": args.password})
        if r.status_code == 200:
            print(f"User {args.username!r} created")
        else:
            # Most likely the user exists already from a previous run
            print(f"Signup {args.username!r}: {r.status_code} {r.json().get('error')}")

        categories = [c["name"] for c in client.get("/categories").json()]
        print(f"Creating {args.items_per_category} items in each of {len(categories)} categories...")
        for name in categories:
            choices = DESCRIPTIONS.get(name, [f"{name} item"])
            for _ in range(args.items_per_category):
                try:
                    r = client.post(
                        "/items",
                        json={"category": name, "description": random.choice(choices), "price": random_price()},
                    )
                    if r.status_code == 200:
                        created_items += 1
                    else:
                        errors.append(f"Item {name}: {r.status_code} {r.text[:80]}")
                except httpx.HTTPError as e:
                    errors.append(f"Item {name}: {e}")

    print(f"\nDone. Items created: {created_items}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
