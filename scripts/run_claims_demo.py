import os
import sys
import json
import asyncio
from rich import print, pretty

from claimmap.lib.config import load_config_file
from claimmap.lib.provider import GenericProvider


async def main(config_path: str, source: str):
    provider = GenericProvider(load_config_file(config_path))
    # a readable file is treated as an already-decoded userinfo payload,
    # anything else as an access token for the configured endpoint
    if os.path.isfile(source):
        with open(source, encoding="utf-8") as f:
            claims = provider.claims_from_payload(json.load(f))
    else:
        claims = await provider.fetch_claims(source)
    print(f"[bold]{provider.config.userinfo_url}[/bold]")
    print(claims.as_dict())


if __name__ == "__main__":
    pretty.install()
    if len(sys.argv) < 3:
        print("usage: run_claims_demo.py <config.json> <payload.json | access-token>")
        sys.exit(2)
    asyncio.run(main(sys.argv[1], sys.argv[2]))
