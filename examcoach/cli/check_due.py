"""CLI running one due check; meant to be called periodically (cron, etc.)."""
from rich.console import Console

from examcoach.cli.common import build_parser, parse_and_open
from examcoach.tools.due_check import DUE_WINDOW_SECONDS, collect_due
from examcoach.tools.store_io import save_store


console = Console()


def main(argv=None):
    parser = build_parser("Report reminders and sessions that are due now")
    parser.add_argument(
        "--window",
        type=int,
        default=DUE_WINDOW_SECONDS,
        help=f"Seconds around now that count as due (default: {DUE_WINDOW_SECONDS})"
    )
    args, store_path, store = parse_and_open(parser, argv)

    due = collect_due(store, window_seconds=args.window)
    if not due:
        console.print("[dim]Nothing due[/dim]")
        return

    save_store(store, store_path)
    for item in due:
        icon = "🔔" if item.kind == "reminder" else "📚"
        console.print(f"{icon} [bold]{item.title}[/bold] - {item.body}")


if __name__ == "__main__":
    main()
