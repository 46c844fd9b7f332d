"""CLI for rndstring."""

from __future__ import annotations

import base64
import functools

import click

from rndstring import __version__
from rndstring.config import Settings
from rndstring.exceptions import RndStringError


def _reraise_as_click(fn):
    """Turn library errors into a clean ``Error: ...`` and exit status 1."""

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except RndStringError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", count=True, help="More logging (repeatable).")
@click.option("--strict", is_flag=True,
              help="Fail instead of using the non-cryptographic fallback source.")
@click.pass_context
def main(ctx: click.Context, verbose: int, strict: bool) -> None:
    """rndstring: random tokens from the system CSPRNG."""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from e
    if strict:
        settings.strict = True
    settings.configure_logging(verbose)
    ctx.obj = settings

    if settings.strict:
        from rndstring.pool import EntropyPool, set_pool

        previous = set_pool(EntropyPool(strict=True))
        ctx.call_on_close(lambda: set_pool(previous))


# ────────────────────────────────────────────────────────────
# Tokens
# ────────────────────────────────────────────────────────────


@main.command()
@click.argument("name", required=False)
@click.option("-n", "--length", type=int, default=None, help="Token length (bytes for hex/b32/b64).")
@click.option("-c", "--count", default=1, type=click.IntRange(min=1), help="Number of tokens.")
@click.pass_obj
@_reraise_as_click
def gen(settings: Settings, name: str | None, length: int | None, count: int) -> None:
    """Generate tokens with a named generator.

    Examples:

        rndstring gen hex -n 16

        rndstring gen letters&digits -n 32 -c 5
    """
    from rndstring.registry import new_generator

    g = new_generator(name or settings.generator, settings.length if length is None else length)
    for _ in range(count):
        click.echo(g.generate())


@main.command()
@click.argument("symbols")
@click.option("-n", "--length", type=int, default=None, help="Token length.")
@click.option("-c", "--count", default=1, type=click.IntRange(min=1), help="Number of tokens.")
@click.pass_obj
@_reraise_as_click
def alphabet(settings: Settings, symbols: str, length: int | None, count: int) -> None:
    """Generate tokens from a custom alphabet (at most 255 symbols).

    Example:

        rndstring alphabet ACGT -n 40
    """
    from rndstring.generators import new_alphabet_generator

    g = new_alphabet_generator(settings.length if length is None else length, symbols)
    for _ in range(count):
        click.echo(g.generate())


@main.command("join")
@click.argument("specs", nargs=-1, required=True)
@click.option("-d", "--delimiter", default="-", show_default=True, help="Separator between parts.")
@_reraise_as_click
def join_cmd(specs: tuple[str, ...], delimiter: str) -> None:
    """Join tokens from several generators, each given as NAME:LENGTH.

    Example:

        rndstring join ucase:4 digits:4 ucase:4
    """
    from rndstring.generators import join
    from rndstring.registry import new_generator

    generators = []
    for spec in specs:
        name, sep, length = spec.rpartition(":")
        if not sep or not name:
            raise click.BadParameter(f"expected NAME:LENGTH, got {spec!r}", param_hint="SPECS")
        try:
            n = int(length)
        except ValueError:
            raise click.BadParameter(f"length must be an integer in {spec!r}", param_hint="SPECS") from None
        generators.append(new_generator(name, n))
    click.echo(join(delimiter, *generators))


@main.command("list")
@click.option("-n", "--length", default=12, show_default=True, help="Length of the sample tokens.")
def list_cmd(length: int) -> None:
    """List registered generators with a sample token."""
    from rich.console import Console
    from rich.table import Table

    from rndstring.registry import list_generator_names, new_generator

    table = Table(title="Generators")
    table.add_column("Name", style="cyan")
    table.add_column("Sample", style="green")
    for name in sorted(list_generator_names()):
        table.add_row(name, new_generator(name, length).generate())
    Console().print(table)


# ────────────────────────────────────────────────────────────
# Raw bytes & health
# ────────────────────────────────────────────────────────────


@main.command("bytes")
@click.option("-n", "--bytes", "n_bytes", default=32, type=click.IntRange(min=0), help="Number of bytes.")
@click.option("--format", "fmt", type=click.Choice(["raw", "hex", "base64"]), default="hex",
              help="Output format.")
@_reraise_as_click
def bytes_cmd(n_bytes: int, fmt: str) -> None:
    """Write random bytes to stdout.

    Examples:

        rndstring bytes -n 64 --format base64

        rndstring bytes -n 1024 --format raw > key.bin
    """
    from rndstring.pool import random_bytes

    data = random_bytes(n_bytes)
    if fmt == "raw":
        out = click.get_binary_stream("stdout")
        out.write(data)
        out.flush()
    elif fmt == "hex":
        click.echo(data.hex())
    elif fmt == "base64":
        click.echo(base64.b64encode(data).decode())


@main.command()
@_reraise_as_click
def health() -> None:
    """Show which entropy sources are available and how often each was used."""
    from rich.console import Console
    from rich.table import Table

    from rndstring.pool import get_pool

    pool = get_pool()
    # exercise the pool once so the counters mean something
    pool.get_random_bytes(32)
    r = pool.health_report()

    table = Table(title=f"Entropy pool ({'strict' if r['strict'] else 'fallback allowed'})")
    for col in ("Role", "Source", "OK", "CSPRNG", "Fills", "Bytes", "Failures"):
        table.add_column(col, justify="left" if col in ("Role", "Source") else "right")
    for s in r["sources"]:
        table.add_row(
            s["role"],
            s["name"],
            "[green]✓[/green]" if s["available"] else "[red]✗[/red]",
            "yes" if s["cryptographic"] else "no",
            f"{s['fills']:,}",
            f"{s['bytes']:,}",
            str(s["failures"]),
        )
    Console().print(table)
