"""List dataset words."""

import sys

import httpx

from lexcoll.cli import client
from lexcoll.cli.render import console
from lexcoll.config import get_settings
from lexcoll.core.dataset import Dataset


def add_subparser(subparsers):
    parser = subparsers.add_parser("words", help="List words in the dataset")
    parser.add_argument("--remote", action="store_true", help="Ask the API server")
    parser.set_defaults(func=run_words)


def run_words(args):
    if args.remote:
        try:
            words = client.list_words()
        except httpx.HTTPError as e:
            console.print(f"[red]✗ Error: {e}[/red]")
            sys.exit(1)
    else:
        words = Dataset.load(get_settings().dataset_path).words()

    if not words:
        console.print("No words.")
        return
    for w in words:
        console.print(w)
