"""Build and lay out the collocation graph for a word."""

import sys

import httpx
from rich import print_json

from lexcoll.cli import client
from lexcoll.cli.commands._common import add_selection_args, apply_selection, lookup
from lexcoll.cli.render import console, print_layout


def add_subparser(subparsers):
    parser = subparsers.add_parser("graph", help="Collocation graph with force layout")
    parser.add_argument("word", help="Word to graph")
    add_selection_args(parser)
    parser.add_argument("--top-n", type=int, default=16, help="Max collocates")
    parser.add_argument("--width", type=float, default=800)
    parser.add_argument("--height", type=float, default=380)
    parser.add_argument("-n", "--iterations", type=int, default=180, help="Simulation ticks")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument("--remote", action="store_true", help="Ask the API server instead of the local dataset")
    parser.set_defaults(func=run_graph)


def run_graph(args):
    if args.remote:
        try:
            data = client.get_graph(args.word, senses=args.senses, top_n=args.top_n)
        except httpx.HTTPStatusError as e:
            console.print(f"[red]✗ Error: {client.error_detail(e)}[/red]")
            sys.exit(1)
        except httpx.HTTPError as e:
            console.print(f"[red]✗ Error: {e}[/red]")
            sys.exit(1)
        print_json(data=data["graph"])
        return

    explorer = lookup(args.word)
    apply_selection(explorer, args)
    laid_out = explorer.layout(
        top_n=args.top_n, width=args.width, height=args.height, iterations=args.iterations,
    )

    if args.json:
        print_json(data=laid_out.to_dict())
    else:
        print_layout(laid_out)
