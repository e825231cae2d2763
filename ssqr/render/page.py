from pathlib import Path
from fastapi import Request
from fastapi.templating import Jinja2Templates
from ssqr.render.qr import CodeRegion

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

def render_page(request: Request, region: CodeRegion):
    """Render the whole page around the QR code region"""
    return templates.TemplateResponse(request, "page.html", {"region": region})
