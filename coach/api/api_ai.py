import logging
from typing import Optional

from openai import OpenAI
from fastapi import APIRouter, Depends, HTTPException

from coach.domain.AthleteProfile import AthleteProfile
from coach.domain.GeneratedPlan import GeneratedPlan
from coach.infra.Plan_Repository import get_repository
from coach.logic.controller.form_controller import FormController, SubmitOutcome
from coach.utilities.config import OPENAI_API_KEY, OPENAI_MODEL
from coach.utilities.validators import AthleteProfileInput

logger = logging.getLogger(__name__)

WEB_SEARCH_TOOL = {"type": "web_search_preview"}


class LLMNotConfiguredError(RuntimeError):
    """Raised when plan generation is attempted without an OpenAI API key."""


# === Helper: Get OpenAI Client ===
def _get_openai_client():
    """Return an OpenAI client if OPENAI_API_KEY is set, otherwise None."""
    if not OPENAI_API_KEY:
        return None
    return OpenAI(api_key=OPENAI_API_KEY)


class PlanServiceClient:
    """Adapter for the two external collaborators: the LLM and the record store."""

    def __init__(self, client: Optional[OpenAI] = None, repository=None, model: str = OPENAI_MODEL):
        self.client = client
        self.repository = repository
        self.model = model

    def generate(self, prompt: str, add_context_from_internet: bool = False) -> str:
        """Send the prompt to the model and return its raw text. Provider errors propagate."""
        if self.client is None:
            raise LLMNotConfiguredError("OPENAI_API_KEY not set; cannot generate a plan.")
        kwargs = {"tools": [WEB_SEARCH_TOOL]} if add_context_from_internet else {}
        response = self.client.responses.create(model=self.model, input=prompt, **kwargs)
        text = response.output_text or ""
        logger.info("Model %s returned %d characters", self.model, len(text))
        return text

    def persist(self, profile: AthleteProfile, plan: GeneratedPlan) -> dict:
        """Write the profile plus the three sections as a new record. Write errors propagate."""
        record = {**profile.to_record(), **plan.to_record_sections()}
        return self.repository.create(record)

    def list_records(self) -> list:
        return self.repository.list()

    def get_record(self, record_id: str) -> Optional[dict]:
        return self.repository.get(record_id)


_service: Optional[PlanServiceClient] = None


def get_plan_service() -> PlanServiceClient:
    """Process-wide service built from configuration (FastAPI dependency)."""
    global _service
    if _service is None:
        if not OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY not set; plan generation will fail until it is configured.")
        _service = PlanServiceClient(_get_openai_client(), get_repository())
    return _service


# === FastAPI Endpoints ===
router = APIRouter(prefix="/api/plans")


@router.post("/generate")
async def generate_plan_api(payload: AthleteProfileInput, service: PlanServiceClient = Depends(get_plan_service)):
    controller = FormController(service)
    controller.update(payload.to_form())
    outcome = await controller.generate_plan()
    if outcome != SubmitOutcome.GENERATED:
        raise HTTPException(status_code=502, detail=controller.pop_alert())
    return {
        "profile": controller.profile.to_form(),
        "plan": controller.plan.to_dict(),
        "record": controller.record,
    }


@router.get("")
def list_plans(service: PlanServiceClient = Depends(get_plan_service)):
    records = service.list_records()
    return {"count": len(records), "plans": records}


@router.get("/{record_id}")
def get_plan(record_id: str, service: PlanServiceClient = Depends(get_plan_service)):
    record = service.get_record(record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Plan not found")
    return record
