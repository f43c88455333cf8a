"""Lightweight REST client for the rosterbench API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def build_mapping(name: str) -> dict[str, str]:
    if not name:
        return {}
    try:
        return json.loads(name)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid mapping JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the rosterbench REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--import-csv", type=Path, help="Upload an entries CSV before querying")
    parser.add_argument("--entry-mapping", default="", help="JSON mapping for entry columns")
    parser.add_argument("--player", help="Player ID to query")
    parser.add_argument("--mode", default="best", choices=["best", "position", "offense", "defense"])
    parser.add_argument("--position", default=None, help="Position code for --mode position")
    parser.add_argument("--benchmarks", action="store_true", help="Print cohort best values and exit")
    args = parser.parse_args()

    cohort = {"mode": args.mode, "position": args.position}

    with httpx.Client(base_url=args.base_url) as client:
        if args.import_csv:
            files = {"entries": (args.import_csv.name, args.import_csv.read_bytes(), "text/csv")}
            mapping = build_mapping(args.entry_mapping)
            data = {"entry_mapping": json.dumps(mapping)} if mapping else {}
            resp = client.post("/entries/import", files=files, data=data)
            resp.raise_for_status()
            print("Import report:", json.dumps(resp.json(), indent=2))

        if args.benchmarks:
            resp = client.post("/benchmarks", json=cohort)
            if resp.status_code == 422:
                raise SystemExit(f"invalid cohort: {resp.json()['detail']}")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if not args.player:
            raise SystemExit("--player is required unless using --benchmarks")

        resp = client.post("/comparison", json={"player_id": args.player, **cohort})
        if resp.status_code == 422:
            raise SystemExit(f"invalid cohort: {resp.json()['detail']}")
        resp.raise_for_status()
        payload = resp.json()
        print(f"{payload['label']}:")
        for metric in payload["metrics"]:
            print(f"  {metric['label']:<24} {metric['raw_value']:>7} {metric['unit']:<4} score {metric['score']}")

        resp = client.post("/neighborhood", json={"player_id": args.player})
        resp.raise_for_status()
        print("Neighborhood:", json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
