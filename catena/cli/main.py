"""
CATENA Command Line Interface.

Commands:
    catena solve X1 Y1 X2 Y2 S    Solve one catenary
    catena run <config.yaml>      Run queries from config
    catena info <table.h5>        List stored solutions
"""

import argparse
import sys
import os


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="catena",
        description="CATENA - Catenary fitting through two points",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Chain of length 12 between (0, 0) and (10, 0)
    catena solve 0 0 10 0 12

    # Same, printing 20 sample points
    catena solve 0 0 10 0 12 --samples 20

    # Run config-based queries
    catena run queries.yaml -v

Configuration format uses pipe-delimited tables in YAML.
        """
    )
    
    subparsers = parser.add_subparsers(dest="command", help="Command")
    
    # =========================================================================
    # SOLVE command - single query
    # =========================================================================
    solve_parser = subparsers.add_parser("solve", help="Solve one catenary")
    solve_parser.add_argument("x1", type=float)
    solve_parser.add_argument("y1", type=float)
    solve_parser.add_argument("x2", type=float)
    solve_parser.add_argument("y2", type=float)
    solve_parser.add_argument("arc_length", type=float, help="Arc length between the points")
    solve_parser.add_argument(
        "-n", "--samples", type=int, default=None,
        help="Print this many segments of sampled points"
    )
    solve_parser.add_argument(
        "--closed-form", action="store_true",
        help="Use the single-equation reduction instead of Newton"
    )
    _add_solver_args(solve_parser)
    
    # =========================================================================
    # RUN command - config-based queries
    # =========================================================================
    run_parser = subparsers.add_parser("run", help="Run queries from config")
    run_parser.add_argument("config", help="YAML configuration file")
    run_parser.add_argument(
        "--no-overwrite", action="store_true",
        help="Fail instead of replacing existing solutions"
    )
    run_parser.add_argument("-v", "--verbose", action="store_true")
    
    # =========================================================================
    # INFO command - list table contents
    # =========================================================================
    info_parser = subparsers.add_parser("info", help="List stored solutions")
    info_parser.add_argument("table", help="HDF5 solution table")
    
    # =========================================================================
    # Parse arguments
    # =========================================================================
    args = parser.parse_args(argv)
    
    if args.command is None:
        parser.print_help()
        sys.exit(0)
    
    if args.command == "solve":
        _run_solve(args)
    elif args.command == "run":
        _run_pipeline(args)
    elif args.command == "info":
        _run_info(args)


def _add_solver_args(parser):
    """Add solver tolerance arguments."""
    parser.add_argument(
        "--tol", type=float, default=1e-10,
        help="Newton convergence tolerance (default: 1e-10)"
    )
    parser.add_argument(
        "--accept-tol", type=float, default=1e-6,
        help="Verification tolerance (default: 1e-6)"
    )
    parser.add_argument(
        "--max-iter", type=int, default=100,
        help="Max Newton iterations per seed (default: 100)"
    )
    parser.add_argument("-v", "--verbose", action="store_true")


def _run_solve(args):
    """Solve a single query and print the parameters."""
    from catena.core.config import SolverConfig
    from catena.core.solver import solve_catenary
    from catena.core.closed_form import solve_catenary_closed_form
    from catena.utils.sampling import sample_catenary
    
    points = ((args.x1, args.y1), (args.x2, args.y2))
    
    try:
        config = SolverConfig(
            tol=args.tol,
            accept_tol=args.accept_tol,
            max_iter=args.max_iter,
        )
        if args.closed_form:
            params = solve_catenary_closed_form(points, args.arc_length, config=config)
        else:
            params = solve_catenary(points, args.arc_length, config=config, verbose=args.verbose)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    
    print(f"a = {params.a:.12g}")
    print(f"b = {params.b:.12g}")
    print(f"c = {params.c:.12g}")
    
    if args.samples is not None:
        x, y = sample_catenary(params, points[0], points[1], args.samples)
        for xi, yi in zip(x, y):
            print(f"{xi:.6f} {yi:.6f}")


def _run_pipeline(args):
    """Run config-based queries."""
    from catena.pipeline.runner import run_pipeline
    
    if not os.path.exists(args.config):
        print(f"ERROR: Config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)
    
    try:
        outcomes = run_pipeline(
            config_path=args.config,
            overwrite=not args.no_overwrite,
            verbose=args.verbose,
        )
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
    
    for outcome in outcomes:
        if outcome.ok:
            p = outcome.params
            print(f"{outcome.name}: a={p.a:.9g} b={p.b:.9g} c={p.c:.9g}")
        else:
            print(f"{outcome.name}: FAILED ({outcome.error})")
    
    if not all(o.ok for o in outcomes):
        sys.exit(2)


def _run_info(args):
    """List solutions stored in a table."""
    from catena.io.table_io import list_solutions, load_solution
    
    if not os.path.exists(args.table):
        print(f"ERROR: Table not found: {args.table}", file=sys.stderr)
        sys.exit(1)
    
    for name in list_solutions(args.table):
        data = load_solution(args.table, name)
        p = data["params"]
        print(
            f"{name}: a={p.a:.9g} b={p.b:.9g} c={p.c:.9g} "
            f"s={data['arc_length']:g} samples={len(data['samples'])}"
        )


if __name__ == "__main__":
    main()
