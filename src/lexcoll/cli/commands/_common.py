"""Helpers shared by the lookup commands."""

import sys

from lexcoll.cli.render import console
from lexcoll.config import get_settings
from lexcoll.core.dataset import Dataset
from lexcoll.core.session import Explorer
from lexcoll.core.view import resolve_labels


def add_selection_args(parser) -> None:
    parser.add_argument("--sense", "-s", action="append", dest="senses",
                        help="Sense id to include (repeatable, default: all)")
    parser.add_argument("--label", "-l", action="append", dest="labels",
                        help="Sense label to include (repeatable)")


def apply_selection(explorer: Explorer, args) -> None:
    if not args.senses and not args.labels:
        return
    ids = list(args.senses or [])
    if args.labels:
        ids += resolve_labels(explorer.entry, args.labels)
    explorer.select(ids)


def lookup(word: str) -> Explorer:
    """Search the local dataset; exit if the word is missing."""
    explorer = Explorer(Dataset.load(get_settings().dataset_path))
    if not explorer.search(word):
        if explorer.searched_word:
            console.print(f"[red]✗ '{explorer.searched_word}' not found in the dataset.[/red]")
            console.print(f"[dim]  Try: lexcoll generate {explorer.searched_word}[/dim]")
        else:
            console.print("[red]✗ Enter a word to look up.[/red]")
        sys.exit(1)
    return explorer
