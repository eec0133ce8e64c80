"""Command line harness: ``python -m uniform_lab``."""

import argparse
import json
import logging
import sys

import matplotlib

from .config import RunConfig
from .report import format_report, report_payload, run_report, save_histograms


def _positive_int(value):
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, received '{value}'.")
    return number


def _non_negative_float(value):
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative number, received '{value}'.")
    return number


def build_parser():
    defaults = RunConfig()
    parser = argparse.ArgumentParser(
        prog="uniform_lab",
        description="Draw from the reference generators and test the samples for uniformity",
    )
    parser.add_argument("--size", type=_positive_int, default=defaults.sample_size,
                        help="Draws per tested sample")
    parser.add_argument("--tolerance", type=_non_negative_float, default=defaults.tolerance,
                        help="Absolute tolerance for every moment")
    parser.add_argument("--table-size", type=_positive_int, default=defaults.table_size,
                        help="Shuffle table size of the MacLaren-Marsaglia generator")
    parser.add_argument("--alpha", type=_non_negative_float, default=defaults.alpha,
                        help="Significance level for the K-S and chi-square tests")
    parser.add_argument("--bins", type=_positive_int, default=defaults.bins,
                        help="Bins for the chi-square test and histograms")
    parser.add_argument("--json", action="store_true", help="Print the results as JSON")
    parser.add_argument("--plot", metavar="PATH", help="Save histograms of both samples to PATH")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = RunConfig(
        sample_size=args.size,
        tolerance=args.tolerance,
        table_size=args.table_size,
        alpha=args.alpha,
        bins=args.bins,
    )
    report = run_report(cfg)

    if args.json:
        print(json.dumps(report_payload(report), indent=2))
    else:
        print(format_report(report))

    if args.plot:
        # histograms are only written to a file
        matplotlib.use("Agg")
        save_histograms(report["samples"], args.plot, bins=cfg.bins)

    return 0 if report["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())
