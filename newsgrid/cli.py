"""
cli.py
======
Command line entry point: scrape listing pages into a table.
"""

import argparse
import os
import sys

import logfire
from dotenv import load_dotenv
from rich.console import Console
from rich.theme import Theme

from newsgrid.config import ScrapeConfig, load_selectors_file, parse_page_range
from newsgrid.core.fetcher import HTMLFetcher, create_fetcher, create_rate_limiter
from newsgrid.core.pipeline import Pipeline
from newsgrid.models.selectors import SiteSelectors
from newsgrid.outputs import OUTPUT_FORMATS, save_table
from newsgrid.storage import SelectorStorage
from newsgrid.utils.exceptions import NewsgridError
from newsgrid.utils.logging import setup_local_logging

THEME = Theme(
    {
        'info': 'dim cyan',
        'warning': 'magenta',
        'danger': 'bold red',
        'success': 'bold green',
        'step': 'bold blue',
    }
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(description='Scrape paginated news listings into a table using CSS selectors')
    parser.add_argument('--template', type=str, help="Listing URL, optionally with a '{page}' placeholder")
    parser.add_argument('--pages', type=str, help="Pages to scrape: 'N' for 1..N or 'A-B' (default: 1-5)")
    parser.add_argument('--delay', type=float, help='Seconds to pause after each request (default: 2)')
    parser.add_argument(
        '--interval', action='store_true', help='Treat --delay as a minimum interval between requests'
    )
    parser.add_argument('--timeout', type=int, help='Request timeout in seconds (default: 30)')
    parser.add_argument(
        '--base-url', type=str, help='Fixed base for resolving relative links (default: the page each link is on)'
    )
    parser.add_argument('--selectors', type=str, help='JSON file with the site selector profile')
    parser.add_argument('--domain', type=str, help='Load the stored selector profile of a domain')
    parser.add_argument('--save-selectors', action='store_true', help='Store the selector profile for this site')
    parser.add_argument('--bodies', action='store_true', help='Also fetch the body text of every article')
    parser.add_argument('--skip-failed', action='store_true', help='Skip pages that fail instead of aborting')
    parser.add_argument('--output', type=str, help='File to export the table to')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Export format (default: from file extension)')
    parser.add_argument('--snapshots', type=str, help='Replay pages from a snapshot directory instead of the network')
    parser.add_argument('--record', type=str, help='Save every fetched page to a snapshot directory')
    parser.add_argument('--debug', action='store_true', help='Write a debug log to .newsgrid/logs/')
    return parser


def _resolve_selectors(args: argparse.Namespace) -> SiteSelectors | None:
    if args.selectors:
        return load_selectors_file(args.selectors)
    if args.domain:
        selectors = SelectorStorage().load_selectors(args.domain)
        if selectors is None:
            raise NewsgridError(f'No stored selectors for {args.domain}')
        return selectors
    return None


def _create_fetcher(args: argparse.Namespace, config: ScrapeConfig) -> HTMLFetcher | None:
    if args.snapshots:
        return create_fetcher('snapshot', snapshots_dir=args.snapshots)
    if args.record:
        return create_fetcher(
            'simple',
            rate_limiter=create_rate_limiter(config.rate_limit, config.delay),
            timeout=config.timeout,
            record_dir=args.record,
        )
    return None


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    load_dotenv()

    logfire_token = os.getenv('LOGFIRE_TOKEN')
    if logfire_token:
        logfire.configure(token=logfire_token)

    args = build_parser().parse_args(argv)
    console = Console(theme=THEME)

    if args.debug:
        log_file = setup_local_logging('DEBUG')
        console.print(f'[info]Debug log: {log_file}[/info]')

    fetcher = None
    try:
        first_page, last_page = parse_page_range(args.pages) if args.pages else (None, None)
        config = ScrapeConfig.from_env(
            template=args.template,
            first_page=first_page,
            last_page=last_page,
            delay=args.delay,
            rate_limit='interval' if args.interval else None,
            timeout=args.timeout,
            base_url=args.base_url,
            selectors=_resolve_selectors(args),
            skip_failed=args.skip_failed or None,
            fetch_bodies=args.bodies or None,
        )

        if args.save_selectors:
            filepath = SelectorStorage().save_selectors(config.template, config.selectors)
            console.print(f'[success]✓ Saved selectors to: {filepath}[/success]')

        fetcher = _create_fetcher(args, config)
        with Pipeline(config, fetcher=fetcher, console=console) as pipeline:
            table = pipeline.run()
            pipeline.show_summary(table)

        if args.output:
            filepath = save_table(args.output, table, args.format, source=config.template)
            console.print(f'[success]✓ Saved {len(table)} articles to: {filepath}[/success]')

    except NewsgridError as e:
        console.print(f'[danger]Error: {e}[/danger]')
        sys.exit(1)

    finally:
        if fetcher:
            fetcher.close()


if __name__ == '__main__':
    main()
