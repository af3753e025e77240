"""
Extract a single job posting from the command line.

Renders the URL exactly like the API does and prints the resulting record
as JSON. Useful for checking selectors against a live page.
"""

import sys
import json
import asyncio
import logging
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from crawler.browser_crawler import BrowserCrawler, BrowserLaunchConfig
from pipeline.extractor import JobExtractor, InvalidURLError

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def extract_job(url: str, timeout_ms=None, settle_ms=None, headful: bool = False) -> dict:
    """Extract one posting and return the external JSON shape."""
    config = BrowserLaunchConfig.from_env()
    if settle_ms is not None:
        config.settle_delay_ms = settle_ms
    if headful:
        config.headless = False

    extractor = JobExtractor(crawler=BrowserCrawler(config), timeout_ms=timeout_ms)
    record = await extractor.extract(url)
    return record.to_dict()


def main(argv=None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description='Extract a job posting from a job board URL')
    parser.add_argument('url', help='Job posting URL')
    parser.add_argument('--timeout-ms', type=int, default=None, help='Navigation timeout in milliseconds')
    parser.add_argument('--settle-ms', type=int, default=None, help='Wait after navigation in milliseconds')
    parser.add_argument('--headful', action='store_true', help='Show the browser window')

    args = parser.parse_args(argv)

    load_dotenv()

    try:
        result = asyncio.run(extract_job(args.url, args.timeout_ms, args.settle_ms, args.headful))
    except InvalidURLError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == '__main__':
    sys.exit(main())
