"""CLI to register an exam and generate its review sessions."""
import sys
from datetime import date

from rich.console import Console

from examcoach.cli.common import build_parser, parse_and_open
from examcoach.tools.exams import add_exam
from examcoach.tools.store_io import save_store


console = Console()


def main(argv=None):
    parser = build_parser("Add an exam and generate its review plan")
    parser.add_argument("subject", help="Subject name")
    parser.add_argument("date", help="Exam date (YYYY-MM-DD)")
    parser.add_argument(
        "--intensity",
        choices=["low", "medium", "high"],
        default="medium",
        help="How many review sessions to generate (2/4/7)"
    )
    parser.add_argument("--content", default="", help="What the exam covers")
    parser.add_argument(
        "--preferred-hour",
        type=int,
        default=None,
        help="Hour of day for sessions (default: profile preference)"
    )
    args, store_path, store = parse_and_open(parser, argv)

    try:
        exam_date = date.fromisoformat(args.date)
    except ValueError:
        console.print(f"[red]Error: invalid date '{args.date}', expected YYYY-MM-DD[/red]")
        sys.exit(1)

    if args.preferred_hour is not None and not 0 <= args.preferred_hour <= 23:
        console.print("[red]Error: --preferred-hour must be between 0 and 23[/red]")
        sys.exit(1)

    exam = add_exam(
        store,
        subject=args.subject,
        exam_date=exam_date,
        content=args.content,
        intensity=args.intensity,
        preferred_hour=args.preferred_hour
    )
    save_store(store, store_path)

    console.print(f"\n✓ [green]Added[/green] {exam.subject} on {exam.exam_date} (id {exam.id})")
    for i, session in enumerate(exam.plan, 1):
        console.print(f"  {i}. {session.when:%a %Y-%m-%d %H:%M}  {session.focus}")
    console.print(f"\nPoints: {store.profile.points}")


if __name__ == "__main__":
    main()
