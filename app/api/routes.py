"""
This module defines the routes for the HTML weather screen.
"""

from datetime import datetime
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.api.v1.crud import WeatherViewCRUD
from app.config import get_settings
from app.services.weather_service import WeatherService
from app.utils.dependencies import get_current_time, get_weather_service
from app.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()

WEB_DIR = Path(__file__).resolve().parent.parent / "web"
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"
BACKGROUNDS_URL = "/static/backgrounds"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["screen"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def screen(
    request: Request,
    weather_service: WeatherService = Depends(get_weather_service),
    now: datetime = Depends(get_current_time),
):
    view = WeatherViewCRUD.transform_state(
        weather_service.state, now, settings.hourly_window_size
    )
    return templates.TemplateResponse(
        request,
        "screen.html",
        {
            "app_name": settings.app_name,
            "view": view,
            "background_url": f"{BACKGROUNDS_URL}/{view.background.image}",
        },
    )


@router.post("/search", include_in_schema=False)
async def submit_search(
    city: str = Form(""),
    weather_service: WeatherService = Depends(get_weather_service),
):
    await weather_service.search(city)
    return RedirectResponse(url="/", status_code=303)
