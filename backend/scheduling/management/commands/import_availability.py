from django.core.management.base import BaseCommand, CommandError
from rich.console import Console
from rich.table import Table

from scheduling.imports import import_availability_csv

console = Console()


class Command(BaseCommand):
    help = "Import tutor availability windows (.csv: tutor_email, day_of_week, start_time, end_time)."

    def add_arguments(self, parser):
        parser.add_argument("--file", required=True)
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Validate the file without making changes to the database',
        )

    def handle(self, *args, **opts):
        dry_run = opts["dry_run"]
        if dry_run:
            console.print("[yellow]Running in DRY RUN mode - no changes will be made[/yellow]")

        try:
            with open(opts["file"], "r", encoding="utf-8") as f:
                stats = import_availability_csv(f, dry_run=dry_run)
        except (OSError, ValueError) as e:
            raise CommandError(str(e))

        table = Table(title="Availability import")
        table.add_column("Result", style="bold")
        table.add_column("Rows", justify="right")
        table.add_row("[green]Imported[/green]", str(stats.ok))
        table.add_row("[red]Skipped[/red]", str(stats.err))
        console.print(table)

        for msg in stats.errors:
            console.print(f"[red]✗[/red] {msg}")
