"""CLI dashboard: progress, upcoming exams and the weekly plan."""
from datetime import date

from rich.console import Console
from rich.table import Table

from examcoach.cli.common import build_parser, parse_and_open
from examcoach.tools.progress import compute_progress, upcoming_exams, weekly_plan


console = Console()


def main(argv=None):
    parser = build_parser("Show study progress and the plan for the next days")
    parser.add_argument(
        "--days",
        type=int,
        default=7,
        help="Number of days to show (default: 7)"
    )
    parser.add_argument(
        "--today",
        action="store_true",
        help="Only show today's sessions"
    )
    args, store_path, store = parse_and_open(parser, argv)

    progress = compute_progress(store)
    upcoming = upcoming_exams(store)

    summary = Table(title="Summary")
    summary.add_column("Metric", style="cyan")
    summary.add_column("Value", style="magenta", justify="right")
    summary.add_row("Total exams", str(len(store.exams)))
    summary.add_row("Next 7 days", str(len(upcoming)))
    summary.add_row("Sessions done", f"{progress.done}/{progress.total} ({progress.percent}%)")
    summary.add_row("Points", str(store.profile.points))
    summary.add_row("Badges", ", ".join(store.profile.badges) or "-")
    console.print(summary)

    days = 1 if args.today else args.days
    for day_plan in weekly_plan(store, start=date.today(), days=days):
        console.print(f"\n[bold]📅 {day_plan.day:%A %d %b}[/bold]")
        if not day_plan.sessions:
            console.print("  [dim]Free day 🎉[/dim]")
            continue
        for item in day_plan.sessions:
            status = "✅" if item.session.done else "⏳"
            style = "red" if item.urgent and not item.session.done else "white"
            console.print(
                f"  [{style}]{item.session.when:%H:%M} {item.subject}[/{style}]"
                f" - {item.session.focus} {status}"
                f"  [dim](exam {item.exam_id}, session {item.index + 1})[/dim]"
            )


if __name__ == "__main__":
    main()
