import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from config import LOG_LEVEL
from routers import destinations, planner

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
)

app = FastAPI(
    title="Trip Planner — India",
    description="Budget-aware destination selection, budget breakdown and day-by-day itineraries",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"]
)

app.include_router(destinations.router)
app.include_router(planner.router)


@app.get("/")
def root():
    return {
        "status":  "ok",
        "message": "Trip Planner API is running",
        "docs":    "/docs"
    }
