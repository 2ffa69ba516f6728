"""
Main Entry Point - NYC Programs Agency Extract

Fetches the NYC programs dataset once and prints it.
By default the raw fetched text is printed unchanged; --agencies prints the
extracted agency list instead.
"""

import sys
import os
import json
import logging
from typing import Any, List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.coreutils.env import Settings, load_settings
from src.coreutils.logging import setup_logging
from src.extract.nyc_api import NYCOpenDataClient
from src.load.local_storage import save_agency_data
from src.transformation.transformers import extract_agencies

logger = logging.getLogger(__name__)


def fetch_program_agencies(settings: Optional[Settings] = None) -> List[Any]:
    """Fetch the programs dataset and return the agency of every record"""
    settings = settings or load_settings()

    with NYCOpenDataClient(
        url=settings.programs_url, timeout=settings.timeout
    ) as client:
        raw_text = client.get_programs()

    return extract_agencies(raw_text)


def run(
    agencies_only: bool = False,
    output_dir: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> str:
    """
    Fetch the programs dataset and build the text to print

    Args:
        agencies_only: Return the agency list (JSON) instead of the raw body
        output_dir: If set, also save raw body and agencies there
        settings: Runtime settings, loaded from the environment if omitted

    Returns:
        str: Text for stdout
    """
    settings = settings or load_settings()

    with NYCOpenDataClient(
        url=settings.programs_url, timeout=settings.timeout
    ) as client:
        raw_text = client.get_programs()

    if not agencies_only and output_dir is None:
        return raw_text

    agencies = extract_agencies(raw_text)
    logger.info(f"Extracted {len(agencies)} agencies")

    if output_dir is not None:
        paths = save_agency_data(raw_text, agencies, output_dir)
        logger.info(f"💾 Saved output: {paths}")

    if agencies_only:
        return json.dumps(agencies, ensure_ascii=False)
    return raw_text


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="NYC Programs Agency Extract")
    parser.add_argument(
        "--agencies",
        action="store_true",
        help="Print the extracted agency list instead of the raw response",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Also save the raw response and agencies to this directory",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(logging.DEBUG if args.verbose else settings.log_level)

    try:
        output = run(
            agencies_only=args.agencies,
            output_dir=args.output_dir,
            settings=settings,
        )
    except Exception as e:
        logger.error(f"❌ Run failed: {e}")
        raise

    # At most one trailing newline
    sys.stdout.write(output if output.endswith("\n") else output + "\n")


if __name__ == "__main__":
    main()
