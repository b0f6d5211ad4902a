from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from workout_api.settings import settings
from workout_api.utils import dates
from workout_api.utils.log import logger

templates = Jinja2Templates(directory=str(Path(__file__).parent))


def render_template(
    request: Request,
    template_name: str,
    *,
    context: dict | None = None,
    status_code: int = 200,
    headers: dict | None = None,
):
    base_context = {
        "current_year": dates.now().year,
        "version": settings.VERSION,
    }

    logger.debug(f"Base context: {base_context}")

    return templates.TemplateResponse(
        request,
        template_name,
        {**base_context, **(context or {})},
        status_code=status_code,
        headers=headers,
    )
