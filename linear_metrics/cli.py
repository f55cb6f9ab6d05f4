import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from .calculator import run_calculators
from .calculators.summary import SummaryCalculator
from .config import ConfigError, config_to_options, default_options
from .config_main import CALCULATORS
from .loader import load
from .report import render_report
from .store import StoreError

logger = logging.getLogger(__name__)

DEFAULT_CSV = "linear-export.csv"


def configure_argument_parser():
    """Configure an ArgumentParser that manages command line options."""

    parser = argparse.ArgumentParser(
        description=(
            "Calculate working-hours cycle and lead time metrics from a Linear CSV export."
        )
    )

    parser.add_argument("config", metavar="config.yml", nargs="?", help="Configuration file")
    parser.add_argument("-v", dest="verbose", action="store_true", help="Verbose output")
    parser.add_argument(
        "-vv",
        dest="very_verbose",
        action="store_true",
        help="Even more verbose output",
    )

    parser.add_argument(
        "--csv",
        metavar="linear-export.csv",
        help=f"CSV export to read (default: {DEFAULT_CSV})",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        default=None,
        help="Save per-ticket metrics and monthly rollups to the metrics database",
    )
    parser.add_argument(
        "--database",
        metavar="db/metrics.db",
        help="Metrics database used with --save (default: db/metrics.db)",
    )
    parser.add_argument(
        "--no-report",
        dest="no_report",
        action="store_true",
        help="Do not print the metrics report",
    )
    parser.add_argument(
        "--output-directory",
        "-o",
        metavar="metrics",
        help=("Write output files to this directory, rather than the current working directory."),
    )

    return parser


def main():
    load_dotenv()

    parser = configure_argument_parser()
    args = parser.parse_args()

    sys.exit(run_command_line(args))


def run_command_line(args):
    logging.basicConfig(
        format="[%(asctime)s %(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        level=(
            logging.DEBUG
            if args.very_verbose
            else logging.INFO if args.verbose else logging.WARNING
        ),
    )

    # Configuration and settings
    # (command line arguments override config file options)

    if args.config:
        logger.debug("Parsing options from %s", args.config)
        try:
            with open(args.config, encoding="utf-8") as config:
                options = config_to_options(
                    config.read(), cwd=os.path.dirname(os.path.abspath(args.config))
                )
        except FileNotFoundError:
            logger.error("Configuration file '%s' not found", args.config)
            return 1
        except ConfigError as e:
            logger.error("Invalid configuration in %s: %s", args.config, e)
            return 1
    else:
        options = default_options()

    settings = options["settings"]
    override_options(settings, args)

    csv_path = os.path.abspath(
        settings["csv"] or os.environ.get("LINEAR_METRICS_CSV") or DEFAULT_CSV
    )
    if not settings["database"]:
        settings["database"] = os.environ.get("LINEAR_METRICS_DATABASE")

    # Set output directory if required
    output_dir = args.output_directory or options.get("output_directory")
    if output_dir:
        logger.info("Changing working directory to %s", output_dir)
        os.makedirs(output_dir, exist_ok=True)
        os.chdir(output_dir)

    logger.info("Loading tickets from %s", csv_path)
    try:
        tickets = load(csv_path, settings["columns"])
    except FileNotFoundError:
        logger.error("CSV export '%s' not found", csv_path)
        return 1

    logger.info("Running calculators")
    try:
        results = run_calculators(CALCULATORS, tickets, settings)
    except StoreError as e:
        logger.error("%s", e)
        return 1

    if not args.no_report:
        print(render_report(results[SummaryCalculator]))

    return 0


def override_options(options, arguments):
    """Update `options` dict with settings from `arguments`
    with the same key.
    """
    for key in options.keys():
        if getattr(arguments, key, None) is not None:
            options[key] = getattr(arguments, key)


if __name__ == "__main__":
    main()
