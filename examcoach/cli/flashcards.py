"""CLI to add flashcards, show stats and run a quick review."""
import sys

from rich.console import Console
from rich.prompt import Prompt

from examcoach.cli.common import build_parser, parse_and_open
from examcoach.tools.flashcards import add_flashcard, deck_stats, find_deck, study_order
from examcoach.tools.store_io import save_store


console = Console()


def main(argv=None):
    parser = build_parser("Manage flashcard decks")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="Add a card")
    add.add_argument("subject")
    add.add_argument("topic")
    add.add_argument("question")
    add.add_argument("answer")

    sub.add_parser("stats", help="Count decks and cards")

    review = sub.add_parser("review", help="Go through a deck in random order")
    review.add_argument("subject")
    review.add_argument("topic")

    args, store_path, store = parse_and_open(parser, argv)

    if args.command == "add":
        try:
            deck = add_flashcard(store, args.subject, args.topic, args.question, args.answer)
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")
            sys.exit(1)
        save_store(store, store_path)
        console.print(f"✓ Added to {deck.subject} / {deck.topic} ({len(deck.cards)} cards)")

    elif args.command == "stats":
        stats = deck_stats(store)
        console.print(f"Decks: {stats.decks} • Cards: {stats.cards}")

    elif args.command == "review":
        deck = find_deck(store, args.subject, args.topic)
        if deck is None or not deck.cards:
            console.print("[yellow]No flashcards for that subject and topic[/yellow]")
            return
        for card in study_order(deck):
            console.print(f"\n[bold]Q: {card.question}[/bold]")
            Prompt.ask("[dim]Enter to show the answer[/dim]", default="", show_default=False)
            console.print(f"A: {card.answer}")


if __name__ == "__main__":
    main()
