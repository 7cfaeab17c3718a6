#!/usr/bin/env python3
"""
hevy-notes CLI.

Sync Hevy workouts into a Markdown vault and build strength reports.

Usage:
    hevy-notes sync --limit 20      # Create notes for recent workouts
    hevy-notes list                 # Show recent workouts on Hevy
    hevy-notes convert <id>         # Write or refresh one workout's note
    hevy-notes weekly               # Weekly volume reports
    hevy-notes monthly              # Monthly personal record reviews
    hevy-notes exercises            # Exercises found in the vault
    hevy-notes stats "Bench Press"  # Exercise stats page
    hevy-notes trend "Bench Press"  # 1RM history of an exercise
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from pydantic import ValidationError
from rich import box

from .api.client import HevyClient
from .config import Settings, get_settings
from .exceptions import ConfigurationError, HevyNotesError
from .metrics.units import WeightUnit
from .services.sync_service import SyncService
from .store.vault import VaultStore
from .analysis.weekly import generate_weekly_reports
from .analysis.monthly import generate_monthly_reviews
from .analysis.exercises import (
    exercise_trend,
    generate_exercise_stats_page,
    list_exercises,
)
from .utils.log_sanitizer import install_log_sanitizer
from .utils.periods import note_date

console = Console()


def build_settings(args) -> Settings:
    """Apply command line overrides to the environment settings.

    Raises:
        ConfigurationError: If a HEVY_* variable holds an invalid value
    """
    try:
        base = get_settings()
    except ValidationError as e:
        fields = sorted({".".join(str(part) for part in err["loc"]) for err in e.errors()})
        raise ConfigurationError(
            f"Invalid settings: {', '.join(fields) or 'unknown field'}. Check your HEVY_* variables.",
            setting=fields[0] if fields else None,
        ) from e

    overrides: Dict[str, Any] = {}
    if args.vault:
        overrides["vault_path"] = Path(args.vault)
    if args.folder:
        overrides["folder_path"] = args.folder.strip().strip("/")
    if args.unit:
        overrides["weight_unit"] = WeightUnit(args.unit)
    return base.model_copy(update=overrides)


def _sync_service(settings: Settings) -> SyncService:
    return SyncService(
        HevyClient.from_settings(settings),
        VaultStore(settings.vault_path),
        settings,
    )


async def cmd_sync(args, settings: Settings):
    """Create notes for recent workouts."""
    console.print()
    console.print(Panel("[bold]hevy-notes - Sync[/bold]"))
    console.print()

    service = _sync_service(settings)
    async with service.client:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
        ) as progress:
            task = progress.add_task("Fetching from Hevy...", total=None)
            result = await service.sync_all(args.limit)
            progress.update(task, completed=True)

    if not result.success:
        console.print(f"[red]{result.error_message}[/red]")
        sys.exit(1)

    table = Table(title="Sync Results", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green")
    table.add_row("Notes created", str(result.notes_created))
    table.add_row("Already in vault", str(result.notes_skipped))
    table.add_row("Failed", str(result.notes_failed))
    console.print(table)
    console.print()
    console.print("[green]Sync complete.[/green]")


async def cmd_list(args, settings: Settings):
    """Show recent workouts available on Hevy."""
    service = _sync_service(settings)
    async with service.client:
        page = await service.list_remote_workouts(args.limit)

    if page is None or not page.workouts:
        console.print("[yellow]No workout data found. Check API key.[/yellow]")
        return

    table = Table(title="Recent Workouts", box=box.ROUNDED)
    table.add_column("Workout", style="cyan")
    table.add_column("Date", style="white")
    table.add_column("ID", style="dim")
    for workout in page.workouts:
        table.add_row(workout.title, note_date(workout.start_time).isoformat(), workout.id)
    console.print(table)
    console.print("Convert one with: hevy-notes convert <ID>")


async def cmd_convert(args, settings: Settings):
    """Write or refresh the note of one workout."""
    service = _sync_service(settings)
    async with service.client:
        written = await service.convert_workout(args.workout_id)

    if written is None:
        console.print(f"[red]Could not fetch workout {args.workout_id}.[/red]")
        sys.exit(1)

    action = "Created" if written.created else "Updated metadata of"
    console.print(f"[green]{action}[/green] {written.path}")


async def cmd_weekly(args, settings: Settings):
    """Write weekly volume reports."""
    reports = await generate_weekly_reports(VaultStore(settings.vault_path), settings)

    if not reports:
        console.print("[yellow]No new weeks to report.[/yellow]")
        return

    table = Table(title="Weekly Reports", box=box.ROUNDED)
    table.add_column("Week", style="cyan")
    table.add_column("Workouts", style="white")
    table.add_column(f"Volume ({settings.weight_unit.value})", style="green")
    for report in reports:
        table.add_row(report.week, str(report.workout_count), f"{report.volume:.1f}")
    console.print(table)
    console.print("[green]Weekly reports updated.[/green]")


async def cmd_monthly(args, settings: Settings):
    """Rebuild monthly personal record reviews."""
    console.print("Archiving monthly reviews...")
    reviews = await generate_monthly_reviews(VaultStore(settings.vault_path), settings)

    for review in reviews:
        console.print(f"  {review.month}: {len(review.notes)} sessions, {len(review.records)} exercises")
    console.print("[green]Monthly reports archived.[/green]")


async def cmd_exercises(args, settings: Settings):
    """List exercises recorded in the vault."""
    names = await list_exercises(VaultStore(settings.vault_path), settings)
    if not names:
        console.print("[yellow]No exercises found. Run 'hevy-notes sync' first.[/yellow]")
        return
    for name in names:
        console.print(f"  {name}")


async def cmd_stats(args, settings: Settings):
    """Create the stats page of an exercise."""
    path = await generate_exercise_stats_page(VaultStore(settings.vault_path), settings, args.exercise)
    console.print(f"[green]Stats page:[/green] {path}")


async def cmd_trend(args, settings: Settings):
    """Show the estimated 1RM history of an exercise."""
    trend = await exercise_trend(VaultStore(settings.vault_path), settings, args.exercise)
    unit = settings.weight_unit.value

    if not trend.points:
        console.print(
            f"[yellow]No local data found for \"{args.exercise}\". "
            f"Check front matter for '{trend.key}'.[/yellow]"
        )
        return

    console.print(Panel(f"[bold]Latest Est. 1RM: {trend.latest.value:.1f} {unit}[/bold]"))
    table = Table(title=f"{args.exercise} (1RM Trend)", box=box.ROUNDED)
    table.add_column("Date", style="cyan")
    table.add_column(f"Est. 1RM ({unit})", style="green")
    for point in trend.points:
        table.add_row(point.day.isoformat(), f"{point.value:.1f}")
    console.print(table)


COMMANDS = {
    "sync": cmd_sync,
    "list": cmd_list,
    "convert": cmd_convert,
    "weekly": cmd_weekly,
    "monthly": cmd_monthly,
    "exercises": cmd_exercises,
    "stats": cmd_stats,
    "trend": cmd_trend,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hevy-notes",
        description="hevy-notes - Hevy workouts as Markdown notes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration is read from HEVY_* environment variables or a .env file:
  HEVY_API_KEY, HEVY_WEIGHT_UNIT, HEVY_FOLDER_PATH, HEVY_VAULT_PATH, HEVY_DEFAULT_LIMIT
        """,
    )
    parser.add_argument("--vault", help="Vault directory (overrides HEVY_VAULT_PATH)")
    parser.add_argument("--folder", help="Workout folder inside the vault")
    parser.add_argument("--unit", choices=[u.value for u in WeightUnit], help="Display weight unit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sync_p = subparsers.add_parser("sync", help="Sync recent workouts into notes")
    sync_p.add_argument("--limit", "-n", type=int, help="Number of recent workouts")

    list_p = subparsers.add_parser("list", help="Show recent workouts on Hevy")
    list_p.add_argument("--limit", "-n", type=int, help="Number of recent workouts")

    convert_p = subparsers.add_parser("convert", help="Write the note of one workout")
    convert_p.add_argument("workout_id", help="Hevy workout ID (see 'list')")

    subparsers.add_parser("weekly", help="Generate weekly reports")
    subparsers.add_parser("monthly", help="Generate monthly fitness reviews")
    subparsers.add_parser("exercises", help="List exercises in the vault")

    stats_p = subparsers.add_parser("stats", help="Generate an exercise stats page")
    stats_p.add_argument("exercise", help="Exercise name")

    trend_p = subparsers.add_parser("trend", help="Show the 1RM trend of an exercise")
    trend_p.add_argument("exercise", help="Exercise name")

    return parser


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return

    try:
        settings = build_settings(args)
        install_log_sanitizer(secrets=[settings.api_key])
        asyncio.run(command(args, settings))
    except HevyNotesError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
