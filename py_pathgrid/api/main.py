"""FastAPI main application."""

import logging
from typing import List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ..config import settings
from ..core.geometry import Direction, classify_edge
from ..core.pathfinding import CostPolicy, PathNotFoundError, search
from ..core.planner import plan_grid
from ..core.render import render_grid

# Configure logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Path Grid API",
    description="Procedural cost grids with planned shortest paths",
    version="0.1.0"
)


# Request/Response models
class GridGenerationRequest(BaseModel):
    """Request to generate and plan a new grid."""

    distance: Optional[int] = Field(
        None, ge=0, le=settings.max_distance, description="Manhattan distance between start and end"
    )
    border: Optional[int] = Field(
        None, ge=0, le=settings.max_border, description="Margin cells around the endpoints"
    )
    hug_edge: Optional[bool] = Field(None, description="Drop the margin on the longer axis")
    seed: Optional[str] = Field(None, description="Random seed for reproducible generation")
    cost_policy: Optional[CostPolicy] = Field(None, description="How negative costs are searched")


class PlannedGridResponse(BaseModel):
    """A generated grid with its planned path."""

    start: Tuple[int, int]
    end: Tuple[int, int]
    rows: int
    columns: int
    costs: List[List[float]]
    path: List[Tuple[int, int]]
    path_cost: float
    start_edge: Direction
    end_edge: Direction
    cost_policy: CostPolicy
    seed: Optional[str] = None
    rendered: str


class PathRequest(BaseModel):
    """Request to plan a path across a caller-supplied grid."""

    start: Tuple[int, int]
    end: Tuple[int, int]
    costs: List[List[float]] = Field(..., min_length=1)
    cost_policy: Optional[CostPolicy] = None


class PathResponse(BaseModel):
    """Planned path across a caller-supplied grid."""

    path: List[Tuple[int, int]]
    path_cost: float
    start_edge: Direction
    end_edge: Direction


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Path Grid API",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/grids/generate", response_model=PlannedGridResponse)
async def generate_grid_endpoint(request: GridGenerationRequest):
    """Generate a random grid, plan a path across it and orient the endpoints."""
    logger.info("Grid generation requested", request=request.model_dump(mode="json"))

    distance = settings.default_distance if request.distance is None else request.distance
    border = settings.default_border if request.border is None else request.border
    hug_edge = settings.default_hug_edge if request.hug_edge is None else request.hug_edge
    cost_policy = request.cost_policy or settings.cost_policy

    try:
        planned = plan_grid(distance, border, hug_edge, seed=request.seed, cost_policy=cost_policy)
    except ValueError as e:
        logger.error("Grid generation rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except PathNotFoundError as e:
        logger.error("Grid planning failed", error=str(e))
        raise HTTPException(status_code=500, detail=f"Path planning failed: {str(e)}")

    return PlannedGridResponse(
        start=planned.start,
        end=planned.end,
        rows=planned.rows,
        columns=planned.columns,
        costs=planned.costs.tolist(),
        path=planned.path,
        path_cost=planned.path_cost,
        start_edge=planned.start_edge,
        end_edge=planned.end_edge,
        cost_policy=planned.cost_policy,
        seed=request.seed,
        rendered=render_grid(planned.costs, planned.path, planned.start, planned.end),
    )


@app.post("/paths/solve", response_model=PathResponse)
async def solve_path(request: PathRequest):
    """Plan a path across a caller-supplied cost grid."""
    cost_policy = request.cost_policy or settings.cost_policy
    logger.info(
        "Path requested",
        start=request.start,
        end=request.end,
        rows=len(request.costs),
        cost_policy=cost_policy.value,
    )

    try:
        result = search(request.start, request.end, request.costs, cost_policy)
    except ValueError as e:
        logger.error("Path request rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except PathNotFoundError as e:
        logger.error("Path planning failed", error=str(e))
        raise HTTPException(status_code=500, detail=f"Path planning failed: {str(e)}")

    rows, columns = len(request.costs), len(request.costs[0])
    return PathResponse(
        path=result.path,
        path_cost=result.cost,
        start_edge=classify_edge(result.path[0], rows, columns),
        end_edge=classify_edge(result.path[-1], rows, columns),
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
