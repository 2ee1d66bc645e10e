"""CLI to mark a session done or snooze it, with the better-time prompt."""
import sys

from rich.console import Console
from rich.prompt import Confirm

from examcoach.cli.common import build_parser, parse_and_open
from examcoach.tools.exams import (
    accept_session_suggestion,
    get_session,
    mark_session_done,
    reject_session_suggestion,
    snooze_session,
)
from examcoach.tools.postpone import DEFAULT_SNOOZE_MINUTES
from examcoach.tools.store_io import save_store


console = Console()


def main(argv=None):
    parser = build_parser("Mark a review session done or snooze it")
    parser.add_argument("exam_id", type=int, help="Exam ID")
    parser.add_argument("session", type=int, help="Session number (1-based)")
    action = parser.add_mutually_exclusive_group(required=True)
    action.add_argument("--done", action="store_true", help="Mark the session completed")
    action.add_argument(
        "--snooze",
        type=int,
        nargs="?",
        const=DEFAULT_SNOOZE_MINUTES,
        metavar="MINUTES",
        help=f"Postpone the session (default: {DEFAULT_SNOOZE_MINUTES} minutes)"
    )
    parser.add_argument(
        "--accept",
        choices=["ask", "yes", "no"],
        default="ask",
        help="Answer to a better-time suggestion (default: ask)"
    )
    args, store_path, store = parse_and_open(parser, argv)

    index = args.session - 1
    if get_session(store, args.exam_id, index) is None:
        console.print(f"[red]Error: exam {args.exam_id} has no session {args.session}[/red]")
        sys.exit(1)

    if args.done:
        session = mark_session_done(store, args.exam_id, index)
        save_store(store, store_path)
        console.print(f"✅ {session.focus} done. Points: {store.profile.points}")
        return

    outcome = snooze_session(store, args.exam_id, index, args.snooze)
    if not outcome.moved:
        console.print("[yellow]Session already completed; nothing to snooze[/yellow]")
        return
    save_store(store, store_path)

    session = get_session(store, args.exam_id, index)
    console.print(f"⏰ Snoozed to {session.when:%Y-%m-%d %H:%M} (postponed {outcome.postpone_count}x)")

    if outcome.suggestion is None:
        return

    proposed = outcome.suggestion.proposed_when
    question = f"You keep postponing \"{session.focus}\". Move it to {proposed:%H:%M} the same day?"
    if args.accept == "ask":
        accepted = Confirm.ask(question)
    else:
        accepted = args.accept == "yes"

    if accepted:
        accept_session_suggestion(store, args.exam_id, index)
        save_store(store, store_path)
        console.print(f"[green]Moved to {session.when:%Y-%m-%d %H:%M}[/green]")
    else:
        reject_session_suggestion(store, args.exam_id, index)
        console.print("Kept the current time")


if __name__ == "__main__":
    main()
