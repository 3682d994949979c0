"""
IPv4 subnet CLI commands.
"""

import click
from rich.console import Console
from rich.table import Table

from ipcalc.config import get_config
from ipcalc.ip.core import IPCalcError, AddressRange, int_to_dotted_decimal
from ipcalc.ip.convert import dotted_decimal_to_int, parse_network
from ipcalc.ip.ranges import summarize as summarize_range
from ipcalc.ip.ranges import overlap as overlap_networks


def _print_blocks(console: Console, blocks: list[AddressRange]) -> None:
    limit = get_config().max_display
    if len(blocks) > limit:
        console.print(f"[yellow]Showing first {limit} blocks...[/yellow]\n")
    for block in blocks[:limit]:
        console.print(block.to_cidr())
    if len(blocks) > limit:
        console.print(f"\n[dim]... and {len(blocks) - limit:,} more[/dim]")


@click.group()
def ip():
    """IPv4 subnet arithmetic."""
    pass


@ip.command()
@click.argument("network")
def calc(network: str):
    """Show network, broadcast and mask details for a network.

    Examples:
        ipcalc ip calc 10.244.170.8/28
        ipcalc ip calc "10.20.30.40 255.255.255.0"
    """
    console = Console()

    try:
        net = parse_network(network)
    except IPCalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    table = Table(title=f"Subnet Calculator: {network}", show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Address", int_to_dotted_decimal(net.address))
    table.add_row("Netmask", int_to_dotted_decimal(net.mask))
    table.add_row("Network", int_to_dotted_decimal(net.network()))
    table.add_row("Broadcast", int_to_dotted_decimal(net.broadcast()))
    if net.is_contiguous():
        table.add_row("Prefix Length", f"/{net.prefix_length}")
        table.add_row("Total Addresses", f"{net.num_addresses:,}")
    else:
        table.add_row("Prefix Length", "[yellow]Discontiguous mask[/yellow]")

    console.print(table)


@ip.command()
@click.argument("start")
@click.argument("stop")
def summarize(start: str, stop: str):
    """Summarize an inclusive address range into the fewest CIDR blocks.

    Examples:
        ipcalc ip summarize 10.0.0.1 10.0.0.3
        ipcalc ip summarize 192.168.0.0 192.168.3.255
    """
    console = Console()

    try:
        blocks = summarize_range(dotted_decimal_to_int(start), dotted_decimal_to_int(stop))
    except IPCalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[cyan]Range:[/cyan] {start} - {stop}")
    console.print(f"[cyan]Blocks:[/cyan] {len(blocks)}\n")
    _print_blocks(console, blocks)


@ip.command()
@click.argument("network1")
@click.argument("network2")
def overlap(network1: str, network2: str):
    """List the CIDR blocks shared by two networks.

    Examples:
        ipcalc ip overlap 10.10.20.0/21 10.10.20.0/24
        ipcalc ip overlap 10.0.0.0/24 10.0.1.0/24
    """
    console = Console()

    try:
        shared = overlap_networks(parse_network(network1), parse_network(network2))
    except IPCalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not shared:
        console.print(f"[green]No[/green] - {network1} and {network2} do not overlap")
        return

    console.print(f"[yellow]Yes[/yellow] - {network1} and {network2} overlap:\n")
    _print_blocks(console, shared)


@ip.command()
@click.argument("network")
@click.argument("other")
def contains(network: str, other: str):
    """Check if a network fully contains another network or address.

    Examples:
        ipcalc ip contains 10.244.170.0/24 10.244.170.8/28
        ipcalc ip contains 10.0.0.0/8 10.1.2.3
    """
    console = Console()

    try:
        outer = parse_network(network)
        inner = parse_network(other)
    except IPCalcError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if inner.is_in(outer):
        console.print(f"[green]Yes[/green] - {other} is within {network}")
    else:
        console.print(f"[red]No[/red] - {other} is not within {network}")
