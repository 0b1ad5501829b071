"""Form controller: field state, validation, and the generate/reset state machine.

States:
  form   -> editing the athlete profile (initial)
  result -> showing a generated plan

form -> result only after generate + extract + persist all succeed.
result -> form only on reset(), which discards the plan and every field value.
A reset during generation also discards the plan that request returns.
One request at a time: a submit while ``is_generating`` is set is rejected.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional

from fastapi.concurrency import run_in_threadpool

from coach.domain.AthleteProfile import AthleteProfile
from coach.domain.GeneratedPlan import GeneratedPlan
from coach.logic.prompt.builder import build_prompt
from coach.utilities.constants import (
    FORM_FIELDS,
    REQUIRED_FIELDS,
    MISSING_FIELDS_ALERT,
    GENERATION_FAILED_ALERT,
)

logger = logging.getLogger(__name__)

FORM_VIEW = "form"
RESULT_VIEW = "result"


class SubmitOutcome(str, Enum):
    GENERATED = "generated"
    INVALID = "invalid"
    IN_FLIGHT = "in_flight"
    REJECTED = "rejected"
    FAILED = "failed"
    DISCARDED = "discarded"


def empty_form() -> Dict[str, str]:
    return {field: "" for field in FORM_FIELDS}


class FormController:
    def __init__(self, service):
        self.service = service
        self.form_data: Dict[str, str] = empty_form()
        self.profile: Optional[AthleteProfile] = None
        self.plan: Optional[GeneratedPlan] = None
        self.record: Optional[dict] = None
        self.is_generating = False
        self.alert_message: Optional[str] = None
        self._resets = 0

    @property
    def view(self) -> str:
        return RESULT_VIEW if self.plan is not None else FORM_VIEW

    def handle_input_change(self, field: str, value) -> None:
        if field not in self.form_data:
            raise KeyError(f"Unknown form field: {field}")
        self.form_data[field] = "" if value is None else str(value)

    def update(self, values: Dict[str, object]) -> None:
        for field, value in values.items():
            self.handle_input_change(field, value)

    def missing_fields(self) -> List[str]:
        return [f for f in REQUIRED_FIELDS if not self.form_data.get(f, "").strip()]

    def pop_alert(self) -> Optional[str]:
        message, self.alert_message = self.alert_message, None
        return message

    async def generate_plan(self) -> SubmitOutcome:
        if self.view == RESULT_VIEW:
            logger.warning("Submit ignored: a plan is already displayed")
            return SubmitOutcome.REJECTED
        if self.is_generating:
            logger.info("Submit ignored: generation already in progress")
            return SubmitOutcome.IN_FLIGHT

        missing = self.missing_fields()
        if missing:
            logger.info("Submit rejected, missing fields: %s", ", ".join(missing))
            self.alert_message = MISSING_FIELDS_ALERT
            return SubmitOutcome.INVALID

        self.is_generating = True
        resets = self._resets
        try:
            profile = AthleteProfile.from_form(self.form_data)
            prompt = build_prompt(profile)
            logger.info("Generating plan for %s", profile)
            result = await run_in_threadpool(self.service.generate, prompt)
            plan = GeneratedPlan.from_response(result)
            record = await run_in_threadpool(self.service.persist, profile, plan)
        except Exception:
            logger.exception("Error generating plan")
            if resets != self._resets:
                return SubmitOutcome.DISCARDED
            self.alert_message = GENERATION_FAILED_ALERT
            return SubmitOutcome.FAILED
        finally:
            self.is_generating = False

        if resets != self._resets:
            logger.info("Form was reset during generation; discarding plan for %s", profile)
            return SubmitOutcome.DISCARDED
        self.profile, self.plan, self.record = profile, plan, record
        return SubmitOutcome.GENERATED

    def reset(self) -> None:
        self._resets += 1
        self.plan = None
        self.profile = None
        self.record = None
        self.form_data = empty_form()
