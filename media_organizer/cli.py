"""
Command-line interface for media-organizer.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from .config import ConfigError, Settings, default_config_path, load_settings
from .constants import PROGRAM, get_console
from .core import MediaOrganizer, setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM,
        description="Move photos and videos into year/month folders based on their dates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Command-line options take precedence over the config file.

Examples:
  {PROGRAM} -m ~/Camera -p ~/Pictures -v ~/Videos
  {PROGRAM} -c ~/media.yml --dry-run
        """
    )

    parser.add_argument(
        "--config-file", "-c", metavar="FILE",
        help=f"File to load configuration from (default: {default_config_path()})"
    )
    parser.add_argument(
        "--media-src", "-m", dest="media_src", metavar="DIRECTORY",
        help="Source directory with media files to organize"
    )
    parser.add_argument(
        "--photos-dst", "-p", dest="photos_dst", metavar="DIRECTORY",
        help="Directory where photos will be moved and organized"
    )
    parser.add_argument(
        "--videos-dst", "-v", dest="videos_dst", metavar="DIRECTORY",
        help="Directory where videos will be moved and organized"
    )
    parser.add_argument(
        "--no-load-default-config-file", action="store_true",
        help="Do not load the config file from the default location"
    )
    parser.add_argument(
        "--dry-run", "-n", action="store_true",
        help="Preview operations without moving any files"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--version", "-V", action="store_true",
        help=f"Display the version number of {PROGRAM} and exit"
    )

    return parser


def show_processing_plan(settings: Settings, dry_run: bool, console: Console) -> None:
    """Display the configuration before execution."""
    console.print("\n[bold]Media Organizer configuration loaded[/bold]")
    console.print(f"  Media source:       [blue]{settings.media_src}[/blue]")
    if settings.photos_dst:
        console.print(f"  Photos destination: [blue]{settings.photos_dst}[/blue]")
    else:
        console.print("  Photos destination: [yellow]disabled[/yellow]")
    if settings.videos_dst:
        console.print(f"  Videos destination: [blue]{settings.videos_dst}[/blue]")
    else:
        console.print("  Videos destination: [yellow]disabled[/yellow]")
    console.print(f"  Processing Mode:    [cyan]{'DRY RUN' if dry_run else 'MOVE'}[/cyan]")
    console.print()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    console = get_console()

    if args.version:
        from . import __version__
        console.print(__version__)
        return 0

    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings(
            {
                'media_src': args.media_src,
                'photos_dst': args.photos_dst,
                'videos_dst': args.videos_dst,
            },
            config_file=Path(args.config_file) if args.config_file else None,
            load_default=not args.no_load_default_config_file,
        )
    except ConfigError as e:
        console.print(f"[red]Error getting config: {e}[/red]")
        return 1

    show_processing_plan(settings, args.dry_run, console)

    organizer = MediaOrganizer(
        photos_dst=settings.photos_dst,
        videos_dst=settings.videos_dst,
        dry_run=args.dry_run,
    )

    try:
        outcomes = organizer.run(settings.media_src)
    except KeyboardInterrupt:
        console.print("\n[red]Operation cancelled by user[/red]")
        return 1
    except Exception as e:
        console.print(f"\n[red]Fatal error: {e}[/red]")
        return 1

    if not outcomes:
        console.print("[yellow]No files found in media source directory[/yellow]")
        return 0

    organizer.print_summary()
    organized = organizer.stats_manager.get_total_moved()
    console.print(f"\n[green]✓ Processing completed[/green] ({organized} of {len(outcomes)} files organized)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
