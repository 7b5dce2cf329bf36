# Backend/main.py

from functools import lru_cache
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from dotenv import load_dotenv

# Load environment variables (.env)
load_dotenv()

from ai import gemini
from core.config import load_settings
from core.errors import GuideError
from core.logger import get_logger

log = get_logger("api")

app = FastAPI(title="AI Travel Guide")


# Request schema for a guide
class GuideRequestBody(BaseModel):
    destination: str
    origin: str
    language: str = "English"


@lru_cache
def get_model():
    settings = load_settings()
    return gemini.get_model(settings.gemini_api_key, settings.gemini_model)


def get_optional_model():
    try:
        return get_model()
    except GuideError as e:
        log.warning("Gemini model unavailable: %s", e.kind.value)
        return None


@app.exception_handler(GuideError)
def guide_error_handler(request: Request, exc: GuideError):
    return JSONResponse(
        status_code=502,
        content={"kind": exc.kind.value, "message": exc.message},
    )


@app.post("/api/guide")
def generate_guide_endpoint(req: GuideRequestBody, model=Depends(get_model)):
    try:
        guide = gemini.generate_travel_guide(model, req.destination, req.origin, req.language)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return guide.model_dump(by_alias=True)


@app.get("/api/trending")
def trending_endpoint(model=Depends(get_optional_model)) -> List[dict]:
    return [s.model_dump(by_alias=True) for s in gemini.trending_or_default(model)]


@app.get("/api/reviews")
def reviews_endpoint(hotel: str, destination: str, model=Depends(get_optional_model)) -> List[dict]:
    if model is None:
        return []
    return [r.model_dump(by_alias=True) for r in gemini.get_hotel_reviews(model, hotel, destination)]
