import argparse

from loguru import logger

from adminbounds.config import load_settings
from adminbounds.fetcher import fetch_levels
from adminbounds.query import ADMIN_LEVELS
from adminbounds.utils import format_size, log_timing


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Download OSM administrative boundaries (admin levels 2 and 4) from Overpass."
    )
    parser.add_argument(
        "--out-dir",
        default=None,
        help="Directory for al<level>.geom.osm files (default: current directory)",
    )
    parser.add_argument(
        "--endpoint",
        default=None,
        help="Overpass interpreter URL (default: $OVERPASS_URL or maps.mail.ru mirror)",
    )
    return parser


@log_timing
def main(argv=None):
    args = build_parser().parse_args(argv)
    settings = load_settings({"out_dir": args.out_dir, "endpoint": args.endpoint})

    results = fetch_levels(ADMIN_LEVELS, settings)
    for r in results:
        logger.info(
            "admin_level={} -> {} ({})", r.level, r.path, format_size(r.size_bytes)
        )
    return results


if __name__ == "__main__":
    main()
