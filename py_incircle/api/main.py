"""FastAPI main application."""

from typing import List, Optional

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.geometry import Circle, Point
from ..core.inscribed_circle import find_inscribed_circle, find_pole_of_inaccessibility
from ..core.pipeline import run_pipeline
from ..core.point_generation import generate_points
from ..core.star_polygon import build_star_polygon
from ..exceptions import InvalidInputError
from ..logging_setup import configure_logging

configure_logging()

logger = structlog.get_logger()

app = FastAPI(
    title="Inscribed Circle API",
    description="Star polygons from point clouds and their largest inscribed circle",
    version=__version__,
)


# Request/Response models
class PointModel(BaseModel):
    """A planar coordinate."""

    x: float
    y: float


class CircleModel(BaseModel):
    """A circle."""

    center: PointModel
    radius: float


class StarPolygonRequest(BaseModel):
    """Request to build a star polygon."""

    points: List[PointModel] = Field(..., description="Input point cloud")
    n: int = Field(settings.default_n, ge=3, description="Number of polygon vertices")
    m: int = Field(settings.default_m, ge=1, description="Step between connected vertices")


class StarPolygonResponse(BaseModel):
    """Ordered star polygon."""

    polygon: List[PointModel]
    vertex_count: int


class InscribedCircleRequest(BaseModel):
    """Request to find a polygon's inscribed circle."""

    polygon: List[PointModel] = Field(..., description="Ordered polygon vertices")
    method: str = Field("voronoi", pattern="^(voronoi|pole)$",
                        description="voronoi (approximate) or pole (polylabel, simple polygons only)")


class InscribedCircleResponse(BaseModel):
    """Inscribed circle, if one was found."""

    found: bool
    circle: Optional[CircleModel] = None


class RunRequest(BaseModel):
    """Request for a full run; give either points or a count to generate."""

    points: Optional[List[PointModel]] = Field(None, description="Input point cloud")
    count: Optional[int] = Field(None, gt=0, description="Number of random points to generate")
    seed: Optional[int] = Field(None, description="Seed for generated points")
    width: float = Field(settings.canvas_width, gt=0, description="Width of the generation area")
    height: float = Field(settings.canvas_height, gt=0, description="Height of the generation area")
    n: int = Field(settings.default_n, ge=3, description="Number of polygon vertices")
    m: int = Field(settings.default_m, ge=1, description="Step between connected vertices")


class RunResponse(BaseModel):
    """Outcome of a full run."""

    status: str
    n: int
    m: int
    points: List[PointModel]
    polygon: List[PointModel]
    circle: Optional[CircleModel] = None
    circumcenters: List[PointModel]
    time_ms: float


def _to_points(models: List[PointModel]) -> List[Point]:
    if len(models) > settings.max_points:
        raise HTTPException(status_code=422,
                            detail=f"At most {settings.max_points} points are accepted")
    return [Point(p.x, p.y) for p in models]


def _point_models(points) -> List[PointModel]:
    return [PointModel(x=p[0], y=p[1]) for p in points]


def _circle_model(circle: Optional[Circle]) -> Optional[CircleModel]:
    if circle is None:
        return None
    return CircleModel(center=PointModel(x=circle.center.x, y=circle.center.y),
                       radius=circle.radius)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    """Report invalid geometric input as a validation error."""
    logger.warning("Invalid input", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Inscribed Circle API",
        "version": __version__,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.post("/star-polygon", response_model=StarPolygonResponse)
async def star_polygon(request: StarPolygonRequest):
    """Build the star polygon {n/m} from the given points.

    An empty polygon means fewer than n points were given.
    """
    polygon = build_star_polygon(_to_points(request.points), request.n, request.m)
    return StarPolygonResponse(polygon=_point_models(polygon), vertex_count=len(polygon))


@app.post("/inscribed-circle", response_model=InscribedCircleResponse)
async def inscribed_circle(request: InscribedCircleRequest):
    """Find the inscribed circle of a polygon."""
    polygon = _to_points(request.polygon)
    if request.method == "pole":
        circle = find_pole_of_inaccessibility(polygon)
    else:
        circle = find_inscribed_circle(polygon)
    return InscribedCircleResponse(found=circle is not None, circle=_circle_model(circle))


@app.post("/runs", response_model=RunResponse)
async def create_run(request: RunRequest):
    """Run the full pipeline on given or generated points."""
    if request.count:
        if request.count > settings.max_points:
            raise HTTPException(status_code=422,
                                detail=f"At most {settings.max_points} points are accepted")
        points = generate_points(request.count, request.width, request.height, seed=request.seed)
    elif request.points:
        points = _to_points(request.points)
    else:
        raise HTTPException(status_code=422,
                            detail="Provide points or a count of points to generate")

    logger.info("Run requested", points=len(points), n=request.n, m=request.m)
    result = run_pipeline(points, request.n, request.m)

    circumcenters = []
    if result.diagram is not None:
        circumcenters = _point_models(result.diagram.circumcenters)

    return RunResponse(
        status=result.status,
        n=result.n,
        m=result.m,
        points=_point_models(points),
        polygon=_point_models(result.polygon),
        circle=_circle_model(result.circle),
        circumcenters=circumcenters,
        time_ms=result.time_ms,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
