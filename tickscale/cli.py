"""Command-line interface for tickscale.

This module provides the Click-based CLI for printing the ticks of a range.
"""

import logging

import click

from tickscale.core.config import DEFAULTS
from tickscale.core.tick_scale import InvalidConfiguration, TickScale
from tickscale.utils.tick_formatter import format_tick_label


@click.command()
@click.argument("start", type=float)
@click.argument("end", type=float)
@click.option("--hint", "-m", type=float, default=None, help="Minimum on-screen tick distance (default: one day step)")
@click.option(
    "--extent",
    "-e",
    type=float,
    default=DEFAULTS.DEFAULT_EXTENT,
    show_default=True,
    help="On-screen axis size, same unit as --hint",
)
@click.option("--forced-step", "-s", type=float, default=None, help="Use this step instead of selecting one")
@click.option(
    "--day-unit",
    type=float,
    default=DEFAULTS.DAY_UNIT,
    show_default=True,
    help="Length of one day in the range's unit",
)
@click.option("--csv", "as_csv", is_flag=True, help="Print the tick table as CSV")
@click.option("--verbose", "-v", is_flag=True, help="Log scale selection details")
def main(start, end, hint, extent, forced_step, day_unit, as_csv, verbose):
    """tickscale - Print nice axis ticks for a time range.

    Ticks are listed from the last one down to the first; major ticks are
    marked with an asterisk.

    Examples:
        tickscale 0 10000 --hint 1 --extent 100      # step 200
        tickscale 0 172800000                        # one-day step
        tickscale --csv 0 60 --forced-step 5         # CSV table
        tickscale -- -500 500 --hint 20              # negative start
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        scale = TickScale(start, end, hint, extent, forced_step, day_unit=day_unit)
    except InvalidConfiguration as e:
        raise click.UsageError(str(e)) from e

    if as_csv:
        click.echo(scale.to_frame().to_csv(index=False), nl=False)
    else:
        step = scale.step
        click.echo(f"step: {format_tick_label(step, step)}  major step: {format_tick_label(scale.major_step, step)}")
        click.echo(
            f"margins: [{format_tick_label(scale.margin_start, step)}, {format_tick_label(scale.margin_end, step)}]"
        )
        for tick in scale.iter_ticks():
            mark = DEFAULTS.MAJOR_MARK if tick.major else " "
            click.echo(f"{mark}{format_tick_label(tick.value, step)}")

    if scale.clamp_count:
        click.echo(f"Warning: cursor clamped {scale.clamp_count} time(s)", err=True)


if __name__ == "__main__":
    main()
