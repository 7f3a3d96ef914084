#! /usr/bin/env python

from heattransport.constants import BOUNDARY_TYPES, MAX_ELEMENTS, MIN_ELEMENTS
from heattransport.exceptions import SingularMatrixError
from heattransport.logging_config import setup_logging
from heattransport.solver import exact_solution, solve

from alive_progress import alive_it
from argparse import ArgumentParser
import logging
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from pathlib import Path

logger = logging.getLogger(__name__)


def sweep(n_values, boundary_type="Robin", bar=True):
    """Solve the problem for each number of elements.

    Configurations with a singular system are recorded as NaN.

    :param n_values: The numbers of elements to solve for.
    :param boundary_type: One of "Robin" or "Neumann".
    :param bar: If True, show a progress bar.

    :returns: A DataFrame with the left boundary value and the maximum nodal
        error against the exact solution for each number of elements.
    """
    n_values = list(n_values)
    rows = []
    for n in alive_it(n_values, title="Sweeping elements...", disable=not bar):
        try:
            solution = solve(n, boundary_type=boundary_type)
            exact = exact_solution(
                solution.positions[:-1], n, boundary_type=boundary_type
            )
        except SingularMatrixError as e:
            logger.warning("Skipping %d elements: %s", n, e)
            rows.append({"elements": n, "u0": np.nan, "error": np.nan})
            continue

        error = np.linalg.norm(solution.values[:-1] - exact, np.inf)
        rows.append({"elements": n, "u0": solution.values[0], "error": error})

    return pd.DataFrame(rows, columns=["elements", "u0", "error"])


def sweep_elements(argv=None):
    parser = ArgumentParser(
        description="Solve the heat transport problem for a range of mesh sizes."
    )
    parser.add_argument("--min", type=int, default=MIN_ELEMENTS)
    parser.add_argument("--max", type=int, default=MAX_ELEMENTS)
    parser.add_argument("--boundary", choices=BOUNDARY_TYPES, default="Robin")
    parser.add_argument("--output", type=Path, default=None, help="Save as CSV.")
    parser.add_argument("--savefig", type=Path, default=None)
    parser.add_argument("--no-plot", action="store_true")
    args = parser.parse_args(argv)

    setup_logging()

    results = sweep(range(args.min, args.max + 1), boundary_type=args.boundary)
    print(results.to_string(index=False))

    if args.output is not None:
        results.to_csv(args.output, index=False)

    if not args.no_plot:
        fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))
        ax1.plot(results["elements"], results["u0"], "ko-")
        ax1.set_xlabel("Elements")
        ax1.set_ylabel(r"$u(0)$")
        ax2.semilogy(results["elements"], results["error"], "kx")
        ax2.set_xlabel("Elements")
        ax2.set_ylabel("Maximum nodal error")
        fig.suptitle(f"{args.boundary} boundary")

        if args.savefig:
            plt.savefig(args.savefig, dpi=300)
        else:
            plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(sweep_elements())
