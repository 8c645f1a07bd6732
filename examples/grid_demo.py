#!/usr/bin/env python3
"""
Simple demo script showing grid generation and path planning.

Usage:
    python examples/grid_demo.py [seed]

If no seed is provided, defaults to "demo123"
"""

import sys

from py_pathgrid.core import CostPolicy, plan_grid, render_grid, render_path


def main():
    """Demonstrate grid planning with each cost policy."""
    seed = sys.argv[1] if len(sys.argv) > 1 else "demo123"

    print("Py-PathGrid Planning Demo")
    print("=" * 40)

    layouts = [
        (8, 1, False),
        (12, 2, True),
    ]

    for distance, border, hug_edge in layouts:
        for policy in CostPolicy:
            print(f"\ndistance={distance} border={border} hug_edge={hug_edge} policy={policy.value}")
            print("-" * 30)

            planned = plan_grid(distance, border, hug_edge, seed=seed, cost_policy=policy)

            print(f"  Grid: {planned.rows}x{planned.columns}")
            print(f"  Start {tuple(planned.start)} opens {planned.start_edge.value}")
            print(f"  End   {tuple(planned.end)} opens {planned.end_edge.value}")
            print(f"  Steps: {len(planned.path) - 1}, cost: {planned.path_cost:.2f}")
            print(f"  Path: {render_path(planned.path)}")
            print()
            print(render_grid(planned.costs, planned.path, planned.start, planned.end))

    print("\nDemo complete!")


if __name__ == "__main__":
    main()
