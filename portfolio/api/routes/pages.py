import logging
import os

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from portfolio.api.exceptions import TemplateNotFoundError

router = APIRouter()
logger = logging.getLogger(__name__)

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
TEMPLATES_DIR = os.path.join(PACKAGE_ROOT, "templates")

HOME_VIEW = "index"

templates = Jinja2Templates(directory=TEMPLATES_DIR)


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    """포트폴리오 메인 페이지"""
    logger.info("Home page requested")
    template_name = f"{HOME_VIEW}.html"
    if not os.path.exists(os.path.join(TEMPLATES_DIR, template_name)):
        raise TemplateNotFoundError(f"Template not found: {template_name}")
    return templates.TemplateResponse(request, template_name, {"view": HOME_VIEW})
