from fastapi import FastAPI
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from vpic_lookup import __version__
from vpic_lookup.api.vehicles import router as vehicles_router

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="vPIC Lookup API",
    description="NHTSA VIN decoding, vehicle descriptors and recall lookups",
    version=__version__,
)

app.include_router(vehicles_router, prefix="/api/vehicles", tags=["Vehicles"])


@app.get("/")
def root():
    return {
        "service": "vPIC Lookup API",
        "status": "online",
        "version": __version__,
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
