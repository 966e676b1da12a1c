from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from newsfront.config import get_settings
from newsfront.models.news import SearchView
from newsfront.services.news import NewsSearchService
from newsfront.services.query import normalize_query

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["search"])


@lru_cache
def get_search_service() -> NewsSearchService:
    return NewsSearchService.from_settings(get_settings())


@router.get("/", response_class=HTMLResponse)
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"search": None})


@router.get("/search", response_class=HTMLResponse)
def search(request: Request, service: NewsSearchService = Depends(get_search_service)):
    view = service.search(normalize_query(request.query_params))
    return templates.TemplateResponse(request, "index.html", {"search": view})


@router.get("/api/search", response_model_by_alias=False)
def search_api(request: Request, service: NewsSearchService = Depends(get_search_service)) -> SearchView:
    return service.search(normalize_query(request.query_params))
