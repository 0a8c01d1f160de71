"""
Command-Line Interface
======================
Sub-commands:
    tabulate  Read a parameter file, evaluate the vertical throw, write a table.
    show      Print the rows of a table file.
    archive   Store parameters and their table in an HDF5 file.
    plot      Plot a table file.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from paramtable.config import APP_VERSION, DEFAULT_NUMPY_FORMAT, DEFAULT_ROW_FORMAT
from paramtable.errors import ParamTableError
from paramtable.logging_config import setup_logging
from paramtable.model.motion import VerticalThrow
from paramtable.model.params_io import read_parameters
from paramtable.model.table import SampleTable
from paramtable.model.table_io import load_table, read_table, save_table, write_table

logger = logging.getLogger(__name__)


def _cmd_tabulate(args: argparse.Namespace) -> int:
    params = read_parameters(args.params, strict=not args.lenient)
    table = VerticalThrow.from_parameters(params).tabulate(params.times)
    if args.numpy:
        save_table(table, args.out, fmt=args.fmt or DEFAULT_NUMPY_FORMAT)
    else:
        write_table(table, args.out, fmt=args.fmt or DEFAULT_ROW_FORMAT, header=not args.no_header)
    print(f"Wrote {len(table)} rows to {args.out}")
    return 0


def _read(path: str, use_numpy: bool) -> SampleTable:
    return load_table(path) if use_numpy else read_table(path)


def _cmd_show(args: argparse.Namespace) -> int:
    table = _read(args.table, args.numpy)
    print(f"{table.x_label:>12} {table.y_label:>12}")
    for x, y in table.rows():
        print(f"{x:12.4f} {y:12.4f}")
    return 0


def _cmd_archive(args: argparse.Namespace) -> int:
    # h5py is only needed here
    from paramtable.model.io import ArchiveManager

    params = read_parameters(args.params, strict=not args.lenient)
    table = VerticalThrow.from_parameters(params).tabulate(params.times)
    ArchiveManager.save(params, table, args.out)
    print(f"Archived {len(table)} rows to {args.out}")
    return 0


def _cmd_plot(args: argparse.Namespace) -> int:
    import matplotlib
    if args.output:
        matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    table = _read(args.table, args.numpy)
    fig, ax = plt.subplots(figsize=(7, 5), layout="constrained")
    ax.plot(table.x, table.y, 'b.-', lw=1.5)
    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.set_xlabel(table.x_label)
    ax.set_ylabel(table.y_label)

    if args.output:
        fig.savefig(args.output, dpi=150)
        logger.info(f"Plot saved to: {args.output}")
        plt.close(fig)
    else:
        plt.show()
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paramtable",
        description="Read parameter files and write/read two-column sample tables.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", default=None, help="Also write logs to this file.")

    sub = parser.add_subparsers(dest="command", required=True)

    p_tab = sub.add_parser("tabulate", help="Tabulate y(t) from a parameter file.")
    p_tab.add_argument("params", help="Parameter file (name = value per line).")
    p_tab.add_argument("out", help="Output table file.")
    p_tab.add_argument("--numpy", action="store_true", help="Write with numpy.savetxt.")
    p_tab.add_argument("--fmt", default=None, help="printf-style format for each value.")
    p_tab.add_argument("--no-header", action="store_true", help="Omit the '#' header line.")
    p_tab.add_argument("--lenient", action="store_true", help="Skip unknown parameter names.")
    p_tab.set_defaults(func=_cmd_tabulate)

    p_show = sub.add_parser("show", help="Print the rows of a table file.")
    p_show.add_argument("table", help="Table file.")
    p_show.add_argument("--numpy", action="store_true", help="Read with numpy.loadtxt.")
    p_show.set_defaults(func=_cmd_show)

    p_arc = sub.add_parser("archive", help="Save parameters and their table to HDF5.")
    p_arc.add_argument("params", help="Parameter file.")
    p_arc.add_argument("out", help="Output .h5 file.")
    p_arc.add_argument("--lenient", action="store_true", help="Skip unknown parameter names.")
    p_arc.set_defaults(func=_cmd_archive)

    p_plot = sub.add_parser("plot", help="Plot a table file.")
    p_plot.add_argument("table", help="Table file.")
    p_plot.add_argument("--numpy", action="store_true", help="Read with numpy.loadtxt.")
    p_plot.add_argument("--output", default=None, help="Save to an image instead of showing.")
    p_plot.set_defaults(func=_cmd_plot)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        return args.func(args)
    except (ParamTableError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
