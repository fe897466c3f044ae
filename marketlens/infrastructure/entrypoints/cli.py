"""
CLI entry point: analyze one instrument and print the result as JSON.

    python -m marketlens.infrastructure.entrypoints.cli crypto BTC
    python -m marketlens.infrastructure.entrypoints.cli equity 2330
    python -m marketlens.infrastructure.entrypoints.cli metal gold
"""

import argparse
import dataclasses
import json
import sys

from dotenv import load_dotenv

from marketlens.domain.entities.market_data import AssetClass
from marketlens.domain.errors import MarketLensError
from marketlens.infrastructure.entrypoints.container import build_container, configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Technical analysis for one instrument")
    parser.add_argument("asset_class", choices=[a.value for a in AssetClass])
    parser.add_argument("query", help="Ticker, stock code or name (e.g. BTC, 2330, gold)")
    args = parser.parse_args(argv)

    load_dotenv()
    configure_logging()
    container = build_container()
    try:
        result = container.use_case.execute(AssetClass(args.asset_class), args.query)
    except (MarketLensError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        container.close()

    print(json.dumps(dataclasses.asdict(result), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
