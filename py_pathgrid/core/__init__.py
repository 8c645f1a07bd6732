"""
Core grid generation and path planning functionality.
"""

from .geometry import Point, Direction, classify_edge, neighbors4
from .sampler import sample_diagonal_split
from .grid_generator import GridConfig, GeneratedGrid, generate_grid, generate_grid_from_config
from .pathfinding import CostPolicy, PathNotFoundError, SearchResult, find_path, search, path_cost
from .planner import PlannedGrid, plan_grid
from .render import render_grid, render_path

__all__ = ['Point', 'Direction', 'classify_edge', 'neighbors4',
           'sample_diagonal_split',
           'GridConfig', 'GeneratedGrid', 'generate_grid', 'generate_grid_from_config',
           'CostPolicy', 'PathNotFoundError', 'SearchResult', 'find_path', 'search', 'path_cost',
           'PlannedGrid', 'plan_grid',
           'render_grid', 'render_path']
