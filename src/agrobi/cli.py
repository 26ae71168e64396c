from __future__ import annotations

import argparse
import json
import sys

import pandas as pd

from agrobi import load_config
from agrobi.connectors import BundledRecordConnector, CSVRecordConnector
from agrobi.errors import ConnectorError, NoHistoricalDataError
from agrobi.ingestion import validate_price_records
from agrobi.pipeline import ForecastingEngine
from agrobi.suppliers import load_suppliers, scorecard_frame, search_suppliers
from agrobi.utils import configure_logging


def _source(args: argparse.Namespace, cfg):
    if args.data:
        return CSVRecordConnector(
            path=args.data,
            date_col=cfg.data.date_col,
            region_col=cfg.data.region_col,
            price_col=cfg.data.price_col,
        )
    return None


def _cmd_forecast(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    engine = ForecastingEngine(cfg, source=_source(args, cfg))

    try:
        result = engine.forecast(args.horizon, growth_factor=args.growth_factor)
    except NoHistoricalDataError as exc:
        print(f"Insufficient data: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    df = result.series.to_frame()
    df["date"] = df["date"].dt.strftime("%Y-%m-%d")
    print(df.to_string(index=False))
    print(f"\nForecast starts after: {result.series.seam_label}")
    print("\nInfluence factors (simulated):")
    for f in reversed(result.factors):
        print(f"  {f.name:<20} {f.importance:g}%")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    if args.data:
        df = CSVRecordConnector(
            path=args.data,
            date_col=cfg.data.date_col,
            region_col=cfg.data.region_col,
            price_col=cfg.data.price_col,
        ).load_frame()
        name = args.data
    else:
        df = BundledRecordConnector().load_frame()
        name = "bundled milk prices"

    result = validate_price_records(
        df,
        date_col=cfg.data.date_col,
        region_col=cfg.data.region_col,
        price_col=cfg.data.price_col,
        dataset=name,
    )
    print(result)
    return 0 if result.is_valid else 1


def _cmd_suppliers(args: argparse.Namespace) -> int:
    cfg = load_config(args.config)
    suppliers = search_suppliers(load_suppliers(cfg.data.suppliers_path), args.query)
    with pd.option_context("display.width", 160):
        print(scorecard_frame(suppliers).to_string(index=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="agrobi")
    parser.add_argument("--config", default=None, help="Path to YAML config")
    parser.add_argument("--log-level", default=None)
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_fc = sub.add_parser("forecast", help="Project milk prices N months ahead")
    p_fc.add_argument("--horizon", type=int, default=None, help="Months to project")
    p_fc.add_argument("--data", default=None, help="CSV with data/estado/preco_leite_produtor")
    p_fc.add_argument("--growth-factor", type=float, default=None)
    p_fc.add_argument("--json", action="store_true", help="Emit JSON instead of a table")
    p_fc.set_defaults(func=_cmd_forecast)

    p_val = sub.add_parser("validate", help="Validate a raw price table")
    p_val.add_argument("--data", default=None)
    p_val.set_defaults(func=_cmd_validate)

    p_sup = sub.add_parser("suppliers", help="Show the supplier scorecard")
    p_sup.add_argument("--query", default=None, help="Filter by name or state")
    p_sup.set_defaults(func=_cmd_suppliers)

    args = parser.parse_args(argv)
    configure_logging(args.log_level or load_config(args.config).logging.level)

    try:
        return int(args.func(args))
    except (ConnectorError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
