# server/api/pages.py

from fastapi import APIRouter
from fastapi.responses import HTMLResponse


router = APIRouter()

LANDING_HTML = "<h2>DevSecOps Lab App</h2><p>Try /user?id=1 and /greet?name=xyz</p>"


@router.get("/greet", response_class=HTMLResponse)
def greet(name: str | None = None):
    # INTENTIONALLY INSECURE: echoes user input without escaping
    return HTMLResponse(f"<h1>Hello {name or 'guest'}</h1>")


@router.get("/", response_class=HTMLResponse)
def landing():
    return HTMLResponse(LANDING_HTML)
