"""Look a word up in the local dataset."""

from lexcoll.cli.commands._common import add_selection_args, apply_selection, lookup
from lexcoll.cli.render import console, print_entry


def add_subparser(subparsers):
    parser = subparsers.add_parser("search", help="Show senses, collocations and examples for a word")
    parser.add_argument("word", help="Word to look up")
    add_selection_args(parser)
    parser.add_argument("--top-n", type=int, default=16, help="Collocates in the graph summary")
    parser.set_defaults(func=run_search)


def run_search(args):
    explorer = lookup(args.word)
    apply_selection(explorer, args)
    print_entry(explorer)

    graph = explorer.graph(top_n=args.top_n)
    console.print(f"\n[bold]Graph[/bold] [dim]({len(graph.nodes)} nodes, {len(graph.links)} links)[/dim]")
    for link in graph.links:
        console.print(f"  {link.source} -> {link.target}  [dim]w={link.weight}[/dim]")
