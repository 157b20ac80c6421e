# run.py

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from rich import print
from core.config import Settings
from core.errors import UpstreamError, ValidationError
from services.itinerary import build_itinerary


def main(argv=None) -> int:
    p = argparse.ArgumentParser(description="Plan a one-day foodie tour.")
    p.add_argument("--city", required=True)
    p.add_argument("--json", action="store_true", help="print the raw itinerary JSON")
    args = p.parse_args(argv)

    logging.basicConfig(level=os.getenv("LOG_LEVEL", "WARNING").upper())

    try:
        itin = build_itinerary(args.city.strip(), Settings.from_env())
    except ValidationError as e:
        print(f"[red]{e}[/]")
        return 2
    except UpstreamError as e:
        print(f"[red]{e}[/]")
        return 1

    if args.json:
        sys.stdout.write(json.dumps(itin.to_dict(), indent=2, ensure_ascii=False) + "\n")
        return 0

    print(f"[bold cyan]→ {itin.city}[/]  {itin.weather.condition} ({itin.weather.dining_type} dining)")
    for m in itin.meals:
        print(f"[yellow]{m.time:<9}[/] {m.dish} @ {m.restaurant}")
    print()
    print(itin.narrative)
    return 0


if __name__ == "__main__":
    sys.exit(main())
