"""CLI to add, list, snooze and delete reminders."""
import sys

from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from examcoach.cli.common import build_parser, parse_and_open
from examcoach.tools.reminders import (
    REMINDER_SNOOZE_MINUTES,
    accept_reminder_suggestion,
    add_reminder,
    delete_reminder,
    list_reminders,
    snooze_reminder,
)
from examcoach.tools.store_io import save_store


console = Console()


def main(argv=None):
    parser = build_parser("Manage study reminders")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a reminder")
    add.add_argument("title")
    add.add_argument("when", help="Date and time (YYYY-MM-DDTHH:MM)")
    add.add_argument("--message", default="")
    add.add_argument("--voice", default="", help="Text to speak when it fires")

    sub.add_parser("list", help="List reminders by time")

    snooze = sub.add_parser("snooze", help="Postpone a reminder")
    snooze.add_argument("reminder_id", type=int)
    snooze.add_argument("--minutes", type=int, default=REMINDER_SNOOZE_MINUTES)
    snooze.add_argument("--accept", choices=["ask", "yes", "no"], default="ask")

    delete = sub.add_parser("delete", help="Delete a reminder")
    delete.add_argument("reminder_id", type=int)

    args, store_path, store = parse_and_open(parser, argv)

    if args.command == "add":
        try:
            reminder = add_reminder(store, args.title, args.when, args.message, args.voice)
        except ValueError:
            console.print(f"[red]Error: invalid reminder (time '{args.when}')[/red]")
            sys.exit(1)
        save_store(store, store_path)
        console.print(f"✓ [green]Reminder set[/green] (id {reminder.id}) for {reminder.when:%Y-%m-%d %H:%M}")

    elif args.command == "list":
        table = Table(title="Reminders")
        table.add_column("ID", style="cyan")
        table.add_column("When")
        table.add_column("Title")
        table.add_column("Message")
        table.add_column("Postponed", justify="right")
        for reminder in list_reminders(store):
            table.add_row(
                str(reminder.id),
                f"{reminder.when:%Y-%m-%d %H:%M}",
                reminder.title,
                reminder.message,
                str(reminder.postpone_count)
            )
        console.print(table)

    elif args.command == "snooze":
        outcome = snooze_reminder(store, args.reminder_id, args.minutes)
        if outcome is None:
            console.print(f"[red]Error: reminder {args.reminder_id} not found[/red]")
            sys.exit(1)
        save_store(store, store_path)
        console.print(f"⏰ Snoozed {args.minutes} minutes (postponed {outcome.postpone_count}x)")

        if outcome.suggestion is not None:
            proposed = outcome.suggestion.proposed_when
            if args.accept == "ask":
                accepted = Confirm.ask(f"You snooze this often. Move it to {proposed:%H:%M}?")
            else:
                accepted = args.accept == "yes"
            if accepted:
                accept_reminder_suggestion(store, args.reminder_id)
                save_store(store, store_path)
                console.print(f"[green]Moved to {proposed:%Y-%m-%d %H:%M}[/green]")

    elif args.command == "delete":
        if not delete_reminder(store, args.reminder_id):
            console.print(f"[red]Error: reminder {args.reminder_id} not found[/red]")
            sys.exit(1)
        save_store(store, store_path)
        console.print("Deleted")


if __name__ == "__main__":
    main()
