#!/usr/bin/env python3
import argparse
import json
import sys
import requests

API = "http://127.0.0.1:5000"

SAMPLES = {
    "hint": ("/api/hint", {"targetSyllable": "MA", "slots": ["M", None], "letters": ["A", "E", "M"]}),
    "exercises": ("/api/exercises", {"count": 3}),
    "match": ("/api/match/hint", {"targetWord": "sol", "options": ["sol", "mesa", "pato"]}),
    "math": ("/api/math/hint", {"targetNumber": 3, "options": [2, 3, 5]}),
}

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("endpoint", choices=sorted(SAMPLES) + ["health"])
    ap.add_argument("--api", default=API, help="base URL of a running server")
    ap.add_argument("--body", default="", help="JSON body to send instead of the sample")
    args = ap.parse_args()

    try:
        if args.endpoint == "health":
            print("GET /health")
            r = requests.get(f"{args.api}/health", timeout=60)
        else:
            path, payload = SAMPLES[args.endpoint]
            if args.body:
                payload = json.loads(args.body)
            print(f"POST {path} with payload:")
            print(json.dumps(payload, indent=2, ensure_ascii=False))
            r = requests.post(f"{args.api}{path}", json=payload, timeout=60)
    except json.JSONDecodeError as e:
        print(f"❌ --body is not valid JSON: {e}")
        sys.exit(2)
    except requests.RequestException as e:
        print(f"❌ HTTP error: {e}")
        sys.exit(1)

    try:
        data = r.json()
    except ValueError:
        print("❌ Could not parse JSON:\n", r.text)
        sys.exit(1)

    print(f"\n=== Response ({r.status_code}) ===")
    print(json.dumps(data, indent=2, ensure_ascii=False))
    if data.get("error"):
        print(f"\n⚠️  Degraded mode: {data['error']}")

if __name__ == "__main__":
    main()
