"""Terminal rendering shared by the commands."""

from rich.console import Console
from rich.table import Table

from lexcoll.core.layout import LaidOutGraph
from lexcoll.core.session import Explorer

console = Console()


def print_senses(explorer: Explorer) -> None:
    entry = explorer.entry
    badge = " [magenta](AI generated)[/magenta]" if explorer.ai_generated else ""
    console.print(f"[bold]Word senses: [cyan]{explorer.searched_word}[/cyan][/bold]{badge}")

    for sense in entry.senses:
        mark = "[green]☑[/green]" if sense.id in explorer.selected else "☐"
        console.print(f"  {mark} [bold]{sense.id}[/bold]  {sense.definition}")
        if sense.id not in explorer.selected:
            continue
        for ex in entry.examples_for(sense.id):
            console.print(f"      [dim]• {ex.sentence}[/dim]")

    if not entry.senses:
        console.print("  [dim]No word senses available for this term.[/dim]")


def print_profiles(explorer: Explorer) -> None:
    view = explorer.view
    console.print("\n[bold]Collocation profiles[/bold]")
    if not view.profiles:
        console.print("  [dim]No collocation data available for selected senses.[/dim]")
        return

    for sense_id, collocations in view.profiles.items():
        table = Table(title=explorer.entry.label_for(sense_id), title_justify="left")
        table.add_column("Collocate", style="bold")
        table.add_column("Frequency", justify="right")
        table.add_column("PMI", justify="right")
        table.add_column("Position")
        for c in collocations:
            table.add_row(c.token, str(c.frequency), f"{c.pmi:.2f}", c.position)
        console.print(table)


def print_examples(explorer: Explorer) -> None:
    view = explorer.view
    console.print("\n[bold]Usage examples[/bold]")
    if not view.examples:
        console.print("  [dim]No examples available for selected senses.[/dim]")
        return
    for ex in view.examples:
        console.print(f'  "{ex.sentence}"  [dim]{explorer.entry.label_for(ex.sense_id)}[/dim]')


def print_layout(laid_out: LaidOutGraph) -> None:
    table = Table(title=f"Layout {laid_out.width:g}x{laid_out.height:g}", title_justify="left")
    table.add_column("Node", style="bold")
    table.add_column("Group")
    table.add_column("Weight", justify="right")
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("r", justify="right")
    for n in laid_out.nodes:
        weight = "" if n.weight is None else f"{n.weight:g}"
        table.add_row(n.id, n.group, weight, f"{n.x:.1f}", f"{n.y:.1f}", f"{n.r:.1f}")
    console.print(table)


def print_entry(explorer: Explorer) -> None:
    print_senses(explorer)
    print_profiles(explorer)
    print_examples(explorer)
