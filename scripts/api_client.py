"""Lightweight REST client for the pyscout API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_attributes(raw: str) -> dict:
    text = Path(raw[1:]).read_text(encoding="utf-8") if raw.startswith("@") else raw
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid attributes JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise SystemExit("Attributes JSON must be an object")
    return data


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the pyscout REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--score", metavar="JSON", help="Athlete attributes JSON (or @file) to score")
    parser.add_argument(
        "--positions",
        nargs="+",
        default=None,
        help="Natural positions; with --score, also request a recommendation",
    )
    parser.add_argument("--stored-score", type=float, default=None, help="Recommend for an already stored score")
    parser.add_argument("--list-positions", action="store_true", help="List position profiles and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.list_positions:
            resp = client.get("/positions")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        score_value = args.stored_score
        if args.score:
            resp = client.post("/score", json=load_attributes(args.score))
            body = resp.json()
            print(json.dumps(body, indent=2))
            if not body.get("success", False):
                raise SystemExit(f"scoring failed: {body.get('message')}")
            score_value = body["score"]

        if args.positions:
            if score_value is None:
                raise SystemExit("--positions needs --score or --stored-score")
            resp = client.post(
                "/recommend",
                json={"score": score_value, "natural_positions": args.positions},
            )
            print(json.dumps(resp.json(), indent=2))
            if resp.status_code >= 400:
                raise SystemExit(1)


if __name__ == "__main__":
    main()
