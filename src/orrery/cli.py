# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for orbital system layouts.

Usage:
    # Layout in the default (explorational) view mode
    orrery -i sol.json -o layout.json

    # Schematic layout, also exported to CSV
    orrery -i sol.json -o layout.json --mode navigational --export-csv layout.csv

    # Check the result for hierarchy and overlap violations (exit code 2 on findings)
    orrery -i sol.json -o layout.json --verify
"""
import argparse
import logging
import sys

from orrery.adapters import CsvLayoutExporter, JsonLayoutWriter, JsonSystemReader
from orrery.domain.celestial_body import find_root_bodies
from orrery.domain.layout import compute_system_layout
from orrery.domain.verification import LayoutReport, verify_layout
from orrery.domain.view_mode import ViewMode, parse_view_mode

logger = logging.getLogger(__name__)


def run(
    input_path: str,
    output_path: str,
    view_mode: ViewMode | str = ViewMode.EXPLORATIONAL,
    export_csv: str | None = None,
    verify: bool = False,
) -> tuple[int, LayoutReport | None]:
    """
    Read a system, lay it out and write the result.

    Returns:
        (count, report): number of bodies written and the verification
        report, or None when verification was not requested.

    Raises:
        FileNotFoundError: If the input file does not exist.
        ValueError: If the input is malformed or has no root body.
    """
    mode = parse_view_mode(view_mode)
    bodies = JsonSystemReader().read_system(input_path)

    if bodies and not find_root_bodies(bodies):
        logger.warning("No root body in %s", input_path)
        raise ValueError(
            f"System in {input_path} has no root body (every body orbits another)"
        )

    layout = compute_system_layout(bodies, mode)
    count = JsonLayoutWriter(view_mode=mode).export(bodies, layout, output_path)

    if export_csv:
        csv_count = CsvLayoutExporter().export(bodies, layout, export_csv)
        print(f"Exported {csv_count} bodies to {export_csv}")

    report = verify_layout(bodies, layout) if verify else None
    return count, report


def _print_report(report: LayoutReport) -> None:
    for body_id in report.missing:
        print(f"  missing result: {body_id}")
    for v in report.hierarchy_violations:
        print(
            f"  hierarchy: {v.child_id} ({v.child_radius:.4f}) "
            f"not smaller than {v.parent_id} ({v.parent_radius:.4f})"
        )
    for o in report.sibling_overlaps:
        print(
            f"  overlap: {o.first_id} and {o.second_id} around {o.parent_id} "
            f"by {o.overlap:.4f}"
        )


def main():
    parser = argparse.ArgumentParser(
        description="Compute collision-free render layouts for orbital systems"
    )
    parser.add_argument(
        '--input', '-i', required=True,
        help="Path to input system JSON (with an 'objects' list)"
    )
    parser.add_argument(
        '--output', '-o', required=True,
        help="Path to write the layout JSON"
    )
    parser.add_argument(
        '--mode', '-m', default=ViewMode.EXPLORATIONAL.value,
        help="View mode: explorational, scientific, navigational, profile "
             "(default: explorational)"
    )
    parser.add_argument(
        '--export-csv',
        help="Also export the layout to CSV"
    )
    parser.add_argument(
        '--verify', action='store_true', default=False,
        help="Check the layout for hierarchy and overlap violations"
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true', default=False,
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        count, report = run(
            input_path=args.input,
            output_path=args.output,
            view_mode=args.mode,
            export_csv=args.export_csv,
            verify=args.verify,
        )
        print(f"Generated {args.output} with {count} bodies.")

    except FileNotFoundError:
        path = args.input
        print(
            f"Error: Input file not found: {path}\n"
            f"Expected a system JSON file with an 'objects' list.",
            file=sys.stderr,
        )
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if report is not None:
        if report.is_valid:
            print("Layout verified: no violations.")
        else:
            print("Layout verification failed:")
            _print_report(report)
            sys.exit(2)


if __name__ == '__main__':
    main()
