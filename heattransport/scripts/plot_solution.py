#! /usr/bin/env python

from heattransport.constants import (
    BOUNDARY_TYPES,
    DEFAULT_ELEMENTS,
    MAX_ELEMENTS,
    MIN_ELEMENTS,
    QUADRATURE_ORDER,
)
from heattransport.exceptions import HeatTransportError
from heattransport.logging_config import setup_logging
from heattransport.quadrature import GaussLegendre
from heattransport.solver import solve

from argparse import ArgumentParser
import logging
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from pathlib import Path

logger = logging.getLogger(__name__)


def clamp_elements(n_elems: int) -> int:
    """Clamp a requested number of elements into the accepted range."""
    return int(np.clip(n_elems, MIN_ELEMENTS, MAX_ELEMENTS))


def solution_frame(solution) -> pd.DataFrame:
    """Tabulate a solution as (position, value) pairs."""
    return pd.DataFrame({"position": solution.positions, "value": solution.values})


def plot(solution, savefig=None):
    """Plot the solution as a line chart."""
    plt.figure(figsize=(8, 6))
    plt.plot(solution.positions, solution.values, "ko-", label=r"$u(x)$")
    plt.xlabel(r"$x$")
    plt.ylabel(r"$u(x)$")
    plt.title(f"Heat transport, {len(solution.positions) - 1} elements")
    plt.legend()

    if savefig:
        plt.savefig(savefig, dpi=300)
    else:
        plt.show()


def parse_args(argv=None):
    parser = ArgumentParser(description="Solve and plot the heat transport problem.")
    parser.add_argument(
        "-n",
        "--elements",
        type=int,
        default=DEFAULT_ELEMENTS,
        help=f"The number of elements, clamped to [{MIN_ELEMENTS}, {MAX_ELEMENTS}].",
    )
    parser.add_argument(
        "--boundary",
        choices=BOUNDARY_TYPES,
        default="Robin",
        help="The formulation of the boundary condition at x = 0.",
    )
    parser.add_argument(
        "--order",
        type=int,
        default=QUADRATURE_ORDER,
        help="The number of Gauss-Legendre points.",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Save the solution as a CSV file."
    )
    parser.add_argument(
        "--savefig", type=Path, default=None, help="Save the plot instead of showing."
    )
    parser.add_argument(
        "--no-plot", action="store_true", help="Skip plotting the solution."
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="The logging level.",
    )
    return parser.parse_args(argv)


def plot_solution(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    n_elems = clamp_elements(args.elements)
    if n_elems != args.elements:
        logger.warning("Clamped %d elements to %d", args.elements, n_elems)

    try:
        solution = solve(
            n_elems,
            integrator=GaussLegendre(args.order),
            boundary_type=args.boundary,
        )
    except HeatTransportError as e:
        logger.error("Could not solve with %d elements: %s", n_elems, e)
        return 1

    logger.info("u(0) = %g", solution.values[0])

    if args.output is not None:
        solution_frame(solution).to_csv(args.output, index=False)
        logger.info("Saved solution to %s", args.output)

    if not args.no_plot:
        plot(solution, savefig=args.savefig)

    return 0


if __name__ == "__main__":
    raise SystemExit(plot_solution())
