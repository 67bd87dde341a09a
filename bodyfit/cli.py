"""
bodyfit CLI: 측정치 입력 → 체형 분석 → 로컬 캐시

    bodyfit analyze --height 170 --weight 65 --chest 90 --waist 70 --hips 95 --shoulders 40
    bodyfit show
    bodyfit clear
"""

import argparse
import json
import sys
from typing import List, Optional

from bodyfit.config.settings import Settings, get_settings
from bodyfit.core.logging import bind_context, configure_logging, get_logger
from bodyfit.fit.fit_analyzer_rule import analyze
from bodyfit.fit.presentation import (
    MEASUREMENT_FIELDS_META,
    completion_message,
    format_measurements,
    format_report,
)
from bodyfit.fit.schema import MEASUREMENT_FIELDS, MeasurementSet, ValidationError
from bodyfit.fit.store import MeasurementStore, create_store


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bodyfit", description="Body type and size analysis")
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Analyze measurements and cache the result")
    for name in MEASUREMENT_FIELDS:
        meta = MEASUREMENT_FIELDS_META[name]
        # 문자열로 받아서 검증은 MeasurementSet.from_form에 맡김
        p_analyze.add_argument(
            f"--{name}",
            default="",
            help=f"{meta['label']} in {meta['unit']} (e.g. {meta['placeholder']})",
        )
    p_analyze.add_argument("--json", action="store_true", help="Print the result as JSON")

    p_show = sub.add_parser("show", help="Show cached measurements and result")
    p_show.add_argument("--json", action="store_true", help="Print as JSON")

    sub.add_parser("clear", help="Clear cached measurements and result")
    return parser


def cmd_analyze(args: argparse.Namespace, store: MeasurementStore) -> int:
    form = {name: getattr(args, name) for name in MEASUREMENT_FIELDS}
    try:
        measurements = MeasurementSet.from_form(form)
    except ValidationError as e:
        print(f"Missing or invalid information: {e}", file=sys.stderr)
        print("Please fill in all measurement fields with positive numbers.", file=sys.stderr)
        return EXIT_INVALID

    result = analyze(measurements)
    store.save(measurements, result)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(completion_message(result))
        print()
        print(format_report(result))
    return EXIT_OK


def cmd_show(args: argparse.Namespace, store: MeasurementStore) -> int:
    measurements = store.load_measurements()
    result = store.load_result()

    if measurements is None and result is None:
        print("No analysis cached. Run `bodyfit analyze` first.", file=sys.stderr)
        return EXIT_EMPTY

    if args.json:
        print(json.dumps({
            "measurements": measurements.to_dict() if measurements else None,
            "result": result.to_dict() if result else None,
        }, indent=2))
        return EXIT_OK

    if measurements is not None:
        print("Measurements:")
        print(format_measurements(measurements))
    if result is not None:
        if measurements is not None:
            print()
        print(format_report(result))
    else:
        print("\nNo result cached for these measurements.")
    return EXIT_OK


def cmd_clear(args: argparse.Namespace, store: MeasurementStore) -> int:
    store.clear()
    print("Cached measurements and analysis cleared.")
    return EXIT_OK


COMMANDS = {
    "analyze": cmd_analyze,
    "show": cmd_show,
    "clear": cmd_clear,
}


def main(
    argv: Optional[List[str]] = None,
    settings: Optional[Settings] = None,
    store: Optional[MeasurementStore] = None,
) -> int:
    args = build_parser().parse_args(argv)
    settings = settings or get_settings()
    configure_logging(json_logs=settings.json_logs, log_level=settings.effective_log_level)

    if store is None:
        store = create_store(settings)
    bind_context(command=args.command)
    logger.debug("Running command", store_backend=settings.store_backend)
    return COMMANDS[args.command](args, store)


if __name__ == "__main__":
    sys.exit(main())
