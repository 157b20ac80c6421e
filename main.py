# main.py

import logging
import os
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from core.config import Settings
from core.errors import UpstreamError, ValidationError
from services.itinerary import ItineraryPlanner

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Foodie Tour API",
    description="One-day food itineraries driven by the local weather",
    version="1.0.0",
)


# Request schema; city is validated by the planner so that a missing
# city gives a 400 rather than a schema error.
class FoodieTourRequest(BaseModel):
    city: Optional[Any] = None


def get_planner() -> ItineraryPlanner:
    planner = getattr(app.state, "planner", None)
    if planner is None:
        planner = ItineraryPlanner(Settings.from_env())
        app.state.planner = planner
    return planner


@app.exception_handler(RequestValidationError)
async def malformed_body_handler(request: Request, exc: RequestValidationError):
    logger.error("Malformed request body on %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=500, content={"message": "Failed to generate itinerary"})


@app.get("/")
def root():
    return {
        "message": "Foodie Tour API is running",
        "endpoints": {"tour": "/api/foodie-tour", "health": "/health"},
    }


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.post("/api/foodie-tour")
def foodie_tour_endpoint(req: FoodieTourRequest):
    try:
        itinerary = get_planner().build(req.city)
    except ValidationError as e:
        return JSONResponse(status_code=400, content={"message": str(e)})
    except UpstreamError:
        return JSONResponse(status_code=500, content={"message": "Failed to generate itinerary"})
    except Exception:
        logger.exception("Unexpected error in /api/foodie-tour")
        return JSONResponse(status_code=500, content={"message": "Failed to generate itinerary"})
    return itinerary.to_dict()
