"""
Public page routes.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from academy.web.pages import render_courses_page

router = APIRouter(tags=["pages"])


@router.get("/courses", response_class=HTMLResponse)
def courses_page() -> HTMLResponse:
    return HTMLResponse(render_courses_page())
