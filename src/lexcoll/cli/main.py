"""
LexCollocations CLI.
"""

import argparse
from lexcoll.cli.commands import search, generate, graph, plot, words, serve


def main():
    parser = argparse.ArgumentParser(prog="lexcoll", description="LexCollocations Explorer CLI")
    subparsers = parser.add_subparsers(dest="command")

    search.add_subparser(subparsers)
    generate.add_subparser(subparsers)
    graph.add_subparser(subparsers)
    plot.add_subparser(subparsers)
    words.add_subparser(subparsers)
    serve.add_subparser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
