#!/usr/bin/env python3
"""
Seed script: creates users and inventory items via the API (no direct DB).
Run: API must be running.
  python scripts/seed_data.py
  python scripts/seed_data.py --users 20 --items-per-user 30 --admin
"""

import argparse
import random

import httpx

API_BASE = "http://localhost:8000/api/v1"

PRODUCTS = [
    ("Laptop stand", "Electronics"), ("Mechanical keyboard", "Electronics"), ("Wireless mouse", "Electronics"),
    ("USB-C cable", "Electronics"), ("27in monitor", "Electronics"), ("Webcam 4K", "Electronics"),
    ("Claw hammer", "Tools"), ("Screwdriver set", "Tools"), ("Tape measure", "Tools"), ("Cordless drill", "Tools"),
    ("Wood screws", "Hardware"), ("Wall anchors", "Hardware"), ("Hinges", "Hardware"),
    ("Coffee maker", "Kitchen"), ("Electric kettle", "Kitchen"), ("Toaster", "Kitchen"), ("Blender", "Kitchen"),
    ("Garden hose", "Garden"), ("Pruning shears", "Garden"), ("Seed tray", "Garden"),
    ("Printer paper", "Office"), ("Ballpoint pens", "Office"), ("Desk organizer", "Office"),
]

DESCRIPTIONS = [
    "Great for home office and remote work.",
    "High quality build and reliable performance.",
    "Popular choice with contractors.",
    "Sold individually.",
    None,
]


def random_item(owner_index: int, item_index: int) -> dict:
    name, category = random.choice(PRODUCTS)
    return {
        "name": name,
        "description": random.choice(DESCRIPTIONS),
        # Skew towards low quantities so stock filters have something to show
        "quantity": random.choice([0, 1, 3, 5, 8, 12, 25, 50, 100, 250]),
        "price": round(random.uniform(0.5, 500), 2),
        "category": category,
        "sku": f"U{owner_index:03d}-{category[:3].upper()}-{item_index:04d}",
    }


def authenticate(client: httpx.Client, email: str, password: str, name: str, role: str) -> str | None:
    """Sign up, or sign in when the account already exists. Returns the bearer token."""
    r = client.post("/auth/signup", json={"email": email, "password": password, "name": name, "role": role})
    if r.status_code == 409:
        r = client.post("/auth/signin", json={"email": email, "password": password})
    if r.status_code not in (200, 201):
        return None
    return r.json().get("access_token")


def main():
    ap = argparse.ArgumentParser(description="Seed users and inventory items via API")
    ap.add_argument("--users", type=int, default=10, help="Number of users to create")
    ap.add_argument("--items-per-user", type=int, default=20, help="Items per user")
    ap.add_argument("--admin", action="store_true", help="Also create admin@example.com with the ADMIN role")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    created_users = 0
    created_items = 0
    errors = []

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        if args.admin:
            if authenticate(client, "admin@example.com", "password123", "Admin", "ADMIN"):
                print("Admin account: admin@example.com / password123")
            else:
                errors.append("Admin account could not be created")

        print(f"Creating {args.users} users with {args.items_per_user} items each...")
        for i in range(args.users):
            email = f"user{i+1}@example.com"
            try:
                token = authenticate(client, email, "password123", f"User {i+1}", "USER")
            except httpx.HTTPError as e:
                errors.append(f"Auth {email}: {e}")
                continue
            if not token:
                errors.append(f"Auth {email}: failed")
                continue
            created_users += 1
            headers = {"Authorization": f"Bearer {token}"}
            for j in range(args.items_per_user):
                try:
                    r = client.post("/items", headers=headers, json=random_item(i + 1, j + 1))
                except httpx.HTTPError as e:
                    errors.append(str(e))
                    continue
                if r.status_code == 201:
                    created_items += 1
                elif r.status_code != 409:  # SKU already seeded by an earlier run
                    errors.append(f"Item {email}: {r.status_code} {r.text[:80]}")
            if (i + 1) % 5 == 0:
                print(f"  ... {i+1} users (total items so far: {created_items})")

    print(f"\nDone. Users: {created_users}, Items created: {created_items}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")


if __name__ == "__main__":
    main()
