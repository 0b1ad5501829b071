"""Record store adapters for submitted profiles and their generated plans.

Two backends share the same ``create`` / ``list`` / ``get`` surface:
  - TrainingPlanRepository: a local JSON list file (default).
  - HostedPlanRepository: a hosted record store reached over HTTP.
"""
import json
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional
from uuid import uuid4

import httpx

from coach.infra.paths import PLANS_FILE
from coach.utilities.config import RECORD_STORE_URL, RECORD_STORE_API_KEY

logger = logging.getLogger(__name__)

ENTITY_NAME = "TrainingPlan"


class TrainingPlanRepository:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or PLANS_FILE)

    def _load(self) -> List[Dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Invalid JSON in plans file %s: %s", self.path, e)
            return []
        return data if isinstance(data, list) else []

    def _atomic_write(self, records: List[Dict]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), prefix=".plans_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(records, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, str(self.path))
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def create(self, record: Dict) -> Dict:
        """Append a new record (with id and created_date) and return it."""
        records = self._load()
        stored = {
            "id": uuid4().hex,
            "created_date": datetime.now().isoformat(timespec="seconds"),
            **record,
        }
        records.append(stored)
        self._atomic_write(records)
        logger.info("Stored training plan %s (%s)", stored["id"], stored.get("sport", ""))
        return stored

    def list(self) -> List[Dict]:
        return self._load()

    def get(self, record_id: str) -> Optional[Dict]:
        return next((r for r in self._load() if r.get("id") == record_id), None)


class HostedPlanRepository:
    """Backend-as-a-service entity collection: POST to create, GET to read."""

    def __init__(self, base_url: str, api_key: str = "", client: Optional[httpx.Client] = None):
        headers = {"api_key": api_key} if api_key else {}
        self.client = client or httpx.Client(base_url=base_url, headers=headers)
        self.collection = f"/entities/{ENTITY_NAME}"

    def create(self, record: Dict) -> Dict:
        response = self.client.post(self.collection, json=record)
        response.raise_for_status()
        return response.json()

    def list(self) -> List[Dict]:
        response = self.client.get(self.collection)
        response.raise_for_status()
        return response.json()

    def get(self, record_id: str) -> Optional[Dict]:
        response = self.client.get(f"{self.collection}/{record_id}")
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()


def get_repository():
    """Hosted store when RECORD_STORE_URL is configured, otherwise the local JSON file."""
    if RECORD_STORE_URL:
        return HostedPlanRepository(RECORD_STORE_URL, RECORD_STORE_API_KEY)
    return TrainingPlanRepository()
