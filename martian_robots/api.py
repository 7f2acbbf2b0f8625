"""
HTTP handler for running a simulation from a JSON payload.

One request maps to one simulation; results come back in input order.
"""

import logging
from typing import List

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from .model.engine import Simulation
from .model.errors import SimulationError
from .model.validation import MAX_COMMAND_LENGTH, MAX_COORDINATE

logger = logging.getLogger(__name__)


# =============================================================================
# Schemas
# =============================================================================

class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(str_strip_whitespace=True)


class SurfaceSize(BaseSchema):
    width: int = Field(..., ge=0, le=MAX_COORDINATE)
    height: int = Field(..., ge=0, le=MAX_COORDINATE)


class Position(BaseSchema):
    x: int = Field(..., ge=0, le=MAX_COORDINATE)
    y: int = Field(..., ge=0, le=MAX_COORDINATE)
    orientation: str = Field(..., min_length=1, max_length=1)


class AgentCommand(BaseSchema):
    start: Position
    commands: str = Field("", max_length=MAX_COMMAND_LENGTH)


class SimulationRequest(BaseSchema):
    surface: SurfaceSize
    agents: List[AgentCommand]


class AgentResult(BaseSchema):
    final: Position
    lost: bool


# =============================================================================
# Application
# =============================================================================

def run_request(body: SimulationRequest) -> List[AgentResult]:
    """Run one simulation for the request payload."""
    simulation = Simulation.create(body.surface.width, body.surface.height)

    results = []
    for agent in body.agents:
        robot = simulation.run_robot(agent.start.x, agent.start.y,
                                     agent.start.orientation, agent.commands)
        results.append(AgentResult(
            final=Position(x=robot.x, y=robot.y,
                           orientation=robot.orientation.value),
            lost=robot.lost,
        ))

    logger.info("Simulated %d agents on %dx%d surface, %d lost",
                len(results), body.surface.width, body.surface.height,
                simulation.dead_count)
    return results


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Martian Robots",
        description="Fleet simulation of robots on a bounded grid",
    )

    @app.exception_handler(SimulationError)
    async def simulation_error_handler(request: Request,
                                       exc: SimulationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": type(exc).__name__,
                "message": str(exc),
            },
        )

    @app.get("/health", tags=["system"])
    async def health_check():
        return {"status": "healthy"}

    @app.post("/simulation", response_model=List[AgentResult], tags=["simulation"])
    async def simulate(body: SimulationRequest) -> List[AgentResult]:
        return run_request(body)

    return app
