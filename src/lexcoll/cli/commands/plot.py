# src/lexcoll/cli/commands/plot.py
"""Draw the laid-out collocation graph to a PNG."""

from lexcoll.cli.commands._common import add_selection_args, apply_selection, lookup
from lexcoll.cli.render import console
from lexcoll.core.graph import TARGET


def add_subparser(subparsers):
    parser = subparsers.add_parser("plot", help="Plot the collocation graph")
    parser.add_argument("word", help="Word to plot")
    add_selection_args(parser)
    parser.add_argument("--top-n", type=int, default=16, help="Max collocates")
    parser.add_argument("--output", "-o", help="Output PNG path (default: <word>.png)")
    parser.add_argument("--no-show", action="store_true", help="Don't display plot")
    parser.set_defaults(func=run_plot)


def run_plot(args):
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        print("Need matplotlib. Run:")
        print("  pip install 'lexcoll[plot]'")
        return

    explorer = lookup(args.word)
    apply_selection(explorer, args)
    laid_out = explorer.layout(top_n=args.top_n)
    pos = {n.id: (n.x, n.y) for n in laid_out.nodes}

    fig, ax = plt.subplots(figsize=(laid_out.width / 100, laid_out.height / 100))

    for link in laid_out.links:
        (x1, y1), (x2, y2) = pos[link.source], pos[link.target]
        ax.plot([x1, x2], [y1, y2], color="#999999", alpha=0.6, linewidth=link.width, zorder=1)

    for n in laid_out.nodes:
        color = "#2563eb" if n.group == TARGET else "#10b981"
        # scatter sizes are in points^2
        ax.scatter([n.x], [n.y], s=(n.r * 2) ** 2, color=color, edgecolors="white", zorder=2)
        ax.annotate(n.id, (n.x + 12, n.y + 4), fontsize=14 if n.group == TARGET else 10)

    ax.set_xlim(0, laid_out.width)
    ax.set_ylim(laid_out.height, 0)  # screen coordinates: y grows downward
    ax.set_aspect("equal")
    ax.axis("off")
    ax.set_title(f"Collocations of '{explorer.searched_word}'")

    out_path = args.output or f"{explorer.searched_word.replace(' ', '_')}.png"
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    console.print(f"[green]✓ Saved to {out_path}[/green]")

    if not args.no_show:
        plt.show()
