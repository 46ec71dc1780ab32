import os
import sys
import json
import tempfile

from fastapi.testclient import TestClient
from wiremit.main import create_app
from wiremit.core.config import Settings

"""Smoke script for the send calculator.

Builds one app per rate provider ('static' and 'external-http') against temp
databases and prints the quote for a handful of amounts, showing either feed
rates or the graceful fallback when the feed is unreachable.
"""

AMOUNTS = (0, 5, 10, 100, 10000, 10001)


def run():
    output = {}
    with tempfile.TemporaryDirectory() as d:
        for provider in ("static", "external-http"):
            settings = Settings(
                db_path=os.path.join(d, f"{provider}.db"),
                rate_provider=provider,
                debug=False,
            )
            with TestClient(create_app(settings_override=settings)) as client:
                output[provider] = {
                    "rates": client.get("/rates").json(),
                    "quotes": {
                        str(a): client.get("/send/quote", params={"amount": a}).json()
                        for a in AMOUNTS
                    },
                }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    sys.path.append(os.getcwd())
    run()
