import argparse
import json
import logging
import sys
import subprocess
from importlib import resources

from .calculator import MeasurementInput, compute_calculation
from .constants import DEFAULT_WATER_TEMP_C, WEIGHT_UNITS
from .errors import CalculationError
from .utils import fmt_karat

def _print_result(result):
    print(f"Density:              {result.density:.2f} g/cm³ (volume {result.volume:.4f} cm³)")
    print(f"Gold content:         {result.gold_percent:.1f}%")
    print(f"Karat (from percent): {result.karat_from_percent:.1f}K")
    if result.karat_from_density is not None:
        print(f"Karat (from density): {fmt_karat(result.karat_from_density)}K ({result.karat_density_range})")
    else:
        print("Karat (from density): ? (outside the table range)")
    print(f"Final range:          {result.final_range_label} [{result.category_label}]")
    delta = "" if result.delta_karat is None else f" (difference {result.delta_karat:.1f}K)"
    print(f"Consistency:          {result.delta_flag}{delta}")
    print(result.delta_note)
    print(result.conclusion)

def run_calc(args) -> int:
    measurement = MeasurementInput(args.air, args.water, args.temp, args.unit)
    try:
        result = compute_calculation(measurement)
    except CalculationError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 2
    if args.json:
        print(json.dumps(result.as_dict(), ensure_ascii=False, indent=2))
    else:
        _print_result(result)
    return 0

def run_app(args) -> int:
    # Locate the packaged app.py on disk
    app_path = resources.files("karat_checker").joinpath("app.py")
    cmd = [
        sys.executable, "-m", "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.address", args.server_address,
        "--browser.gatherUsageStats", "false",
    ]
    if args.headless:
        cmd += ["--server.headless", "true"]

    # Defer all runtime logging/serving to Streamlit
    return subprocess.call(cmd)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="karat-checker",
        description="Estimate gold purity (karat) from hydrostatic weighing."
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Compute one result from weighing data")
    calc.add_argument("--air", required=True, help="Weight in air")
    calc.add_argument("--water", required=True, help="Weight in water")
    calc.add_argument("--temp", default=DEFAULT_WATER_TEMP_C, help="Water temperature in °C (default: 20)")
    calc.add_argument("--unit", choices=WEIGHT_UNITS, default="gram", help="Weight unit (default: gram)")
    calc.add_argument("--json", action="store_true", help="Print the result as JSON")
    calc.set_defaults(func=run_calc)

    app = sub.add_parser("app", help="Launch the Streamlit app")
    app.add_argument("--port", type=int, default=8501, help="Port to serve on (default: 8501)")
    app.add_argument("--headless", action="store_true", help="Run in headless mode (no auto-browser)")
    app.add_argument("--server-address", default="localhost", help="Bind address (default: localhost)")
    app.set_defaults(func=run_app)
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.exit(args.func(args))

if __name__ == "__main__":
    main()
