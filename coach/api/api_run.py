from fastapi import (
    FastAPI,
    Request,
    Form,
    HTTPException,
    Response,
    Depends,
)
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from datetime import datetime
from typing import Optional
import logging
import re

from coach.api import sessions
from coach.api.api_ai import router as ai_router, get_plan_service, PlanServiceClient
from coach.infra.pdf_utils import generate_pdf_for_plan
from coach.logic.controller.form_controller import FormController, RESULT_VIEW
from coach.logic.reporting.renderer import render_plan
from coach.utilities.config import STATIC_DIR, TEMPLATES_DIR, DEBUG

# Logging
logger = logging.getLogger("coach_app")

# Initialize FastAPI app
app = FastAPI(title="AI Sports Coach", debug=DEBUG)

# Include routers
app.include_router(ai_router)

# Static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

# Templates
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _ts() -> int:
    """Cache-busting timestamp for static assets."""
    return int(datetime.now().timestamp())


# -------------------- Helpers --------------------
def _session_id(request: Request) -> str:
    return request.cookies.get(sessions.SESSION_COOKIE) or sessions.new_session_id()


def _with_session(response: Response, session_id: str) -> Response:
    response.set_cookie(sessions.SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response


def _controller(request: Request, service: PlanServiceClient) -> tuple[str, FormController]:
    session_id = _session_id(request)
    return session_id, sessions.get_controller(session_id, service)


# -------------------- UI PAGES --------------------
@app.get("/", response_class=HTMLResponse)
def main_page(request: Request, service: PlanServiceClient = Depends(get_plan_service)):
    session_id, controller = _controller(request, service)
    context = {
        "form": controller.form_data,
        "is_generating": controller.is_generating,
        "alert_message": controller.pop_alert(),
        "time": _ts(),
    }
    if controller.view == RESULT_VIEW:
        context.update({
            "profile": controller.profile,
            "blocks": render_plan(controller.plan),
        })
        resp = templates.TemplateResponse(request, "plan.html", context)
    else:
        resp = templates.TemplateResponse(request, "index.html", context)
    resp.headers["Cache-Control"] = "no-store"
    return _with_session(resp, session_id)


@app.post("/generate")
async def generate(
    request: Request,
    sport: str = Form(""),
    age: str = Form(""),
    height: str = Form(""),
    weight: str = Form(""),
    injuries: str = Form(""),
    goal: str = Form(""),
    service: PlanServiceClient = Depends(get_plan_service),
):
    session_id, controller = _controller(request, service)
    if controller.view != RESULT_VIEW:
        controller.update({
            "sport": sport, "age": age, "height": height,
            "weight": weight, "injuries": injuries, "goal": goal,
        })
    outcome = await controller.generate_plan()
    logger.info("Generate request for session %s: %s", session_id[:8], outcome.value)
    return _with_session(RedirectResponse(url="/", status_code=303), session_id)


@app.post("/reset")
def reset(request: Request, service: PlanServiceClient = Depends(get_plan_service)):
    session_id, controller = _controller(request, service)
    controller.reset()
    return _with_session(RedirectResponse(url="/", status_code=303), session_id)


@app.get("/export_pdf")
def export_pdf(request: Request):
    controller = sessions.peek_controller(request.cookies.get(sessions.SESSION_COOKIE))
    if controller is None or controller.view != RESULT_VIEW:
        raise HTTPException(status_code=404, detail="No generated plan to export")
    pdf_bytes = generate_pdf_for_plan(controller.profile, controller.plan)
    slug = re.sub(r"[^a-z0-9]+", "_", controller.profile.sport.lower()).strip("_") or "athlete"
    filename = f"training_plan_{slug}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


# -------------------- API: Controller state (polled by frontend) --------------------
@app.get("/api/state")
def api_state(request: Request):
    controller: Optional[FormController] = sessions.peek_controller(request.cookies.get(sessions.SESSION_COOKIE))
    if controller is None:
        return {"view": "form", "is_generating": False, "form": {}}
    return {
        "view": controller.view,
        "is_generating": controller.is_generating,
        "form": controller.form_data,
    }
