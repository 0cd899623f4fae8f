"""Generate a word entry through the API's AI endpoint."""

import asyncio
import sys

import httpx

from lexcoll.cli import client
from lexcoll.cli.commands._common import add_selection_args, apply_selection
from lexcoll.cli.render import console, print_entry
from lexcoll.config import get_settings
from lexcoll.core.dataset import Dataset
from lexcoll.core.session import Explorer, RequestState


def add_subparser(subparsers):
    parser = subparsers.add_parser("generate", help="Generate senses and collocations with AI")
    parser.add_argument("word", help="Word to generate")
    add_selection_args(parser)
    parser.set_defaults(func=run_generate)


async def fetch(word: str) -> dict:
    try:
        return await client.generate_async(word)
    except httpx.HTTPStatusError as e:
        raise RuntimeError(f"{e.response.status_code}: {client.error_detail(e)}") from e


def run_generate(args):
    explorer = Explorer(Dataset.load(get_settings().dataset_path))

    with console.status(f"Generating '{args.word}'..."):
        asyncio.run(explorer.generate(fetch, word=args.word))

    if explorer.request_state is not RequestState.SUCCEEDED:
        console.print(f"[red]✗ Generation failed for '{explorer.searched_word}'[/red]")
        if explorer.error:
            console.print(f"[dim]  {explorer.error}[/dim]")
        sys.exit(1)

    console.print(f"[green]✓ Generated '{explorer.searched_word}'[/green]\n")
    apply_selection(explorer, args)
    print_entry(explorer)
