"""Live check - fetch real profiles, report their classification, save HTML."""

import asyncio
from datetime import datetime
from pathlib import Path

from steamlookup.config import AppConfig
from steamlookup.core.classifier import classify
from steamlookup.core.fetcher import create_client, fetch_profile_page
from steamlookup.core.parser import parse_page
from steamlookup.exceptions import SteamLookupError

# Identifiers to check
STEAM_IDS = [
    "76561197960287930",
    "76561197960265728",
]

FIXTURES_DIR = Path(__file__).parent.parent / "tests" / "fixtures" / "live"


async def check_profile(client, config: AppConfig, steam_id: str, save_fixture: bool = True) -> dict:
    """Fetch one profile and print what was scraped."""
    print(f"\n{'='*60}")
    print(f"Fetching {steam_id}...")
    print(f"{'='*60}")

    url = config.profile_url(steam_id)
    start = datetime.now()

    try:
        result = await fetch_profile_page(client, url)
    except SteamLookupError as e:
        print(f"❌ Fetch failed: {e}")
        return {"steam_id": steam_id, "variant": "fetch_failed", "error": str(e)}

    duration_ms = (datetime.now() - start).total_seconds() * 1000
    print(f"✓ Fetched in {duration_ms:.0f}ms ({len(result.html)} bytes)")

    if save_fixture:
        FIXTURES_DIR.mkdir(parents=True, exist_ok=True)
        fixture_path = FIXTURES_DIR / f"{steam_id}.html"
        fixture_path.write_text(result.html, encoding="utf-8")
        print(f"✓ Saved fixture: {fixture_path}")

    fields = parse_page(result.html)
    snapshot = classify(fields, steam_id, url)

    print("\n--- Scraped fields ---")
    for name, value in fields.as_dict().items():
        print(f"  {name}: {value or '(empty)'}")
    print(f"\n  => {snapshot.variant}")

    return {"steam_id": steam_id, "variant": snapshot.variant, "duration_ms": duration_ms}


async def main():
    config = AppConfig()
    results = []

    async with create_client(config) as client:
        for steam_id in STEAM_IDS:
            results.append(await check_profile(client, config, steam_id))

    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print("\n| SteamID | Variant |")
    print("|---------|---------|")
    for r in results:
        print(f"| {r['steam_id']} | {r['variant']} |")


if __name__ == "__main__":
    asyncio.run(main())
