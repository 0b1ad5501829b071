import json
import tempfile
import unittest
from pathlib import Path

import httpx

from coach.api.api_ai import PlanServiceClient, LLMNotConfiguredError, WEB_SEARCH_TOOL
from coach.domain.AthleteProfile import AthleteProfile
from coach.domain.GeneratedPlan import GeneratedPlan
from coach.infra.Plan_Repository import TrainingPlanRepository, HostedPlanRepository
from coach.tests.fakes import FakeOpenAI, InMemoryRepository, SAMPLE_PLAN_TEXT, SOCCER_FORM


class TestPlanServiceClient(unittest.TestCase):

    def setUp(self):
        self.client = FakeOpenAI()
        self.repository = InMemoryRepository()
        self.service = PlanServiceClient(self.client, self.repository, model="gpt-test")

    def test_generate_returns_raw_text(self):
        text = self.service.generate("Make me a plan")
        self.assertEqual(text, SAMPLE_PLAN_TEXT)
        self.assertEqual(self.client.responses.calls, [{"model": "gpt-test", "input": "Make me a plan"}])

    def test_internet_context_attaches_search_tool(self):
        self.service.generate("Make me a plan", add_context_from_internet=True)
        self.assertEqual(self.client.responses.calls[0]["tools"], [WEB_SEARCH_TOOL])

    def test_provider_error_propagates_unmodified(self):
        error = TimeoutError("read timed out")
        service = PlanServiceClient(FakeOpenAI(error=error), self.repository)
        with self.assertRaises(TimeoutError) as ctx:
            service.generate("prompt")
        self.assertIs(ctx.exception, error)

    def test_generate_without_client_raises(self):
        service = PlanServiceClient(None, self.repository)
        with self.assertRaises(LLMNotConfiguredError):
            service.generate("prompt")

    def test_persist_writes_profile_and_sections(self):
        profile = AthleteProfile.from_form(SOCCER_FORM)
        plan = GeneratedPlan.from_response(SAMPLE_PLAN_TEXT)
        record = self.service.persist(profile, plan)
        self.assertEqual(self.repository.records, [record])
        self.assertEqual(set(record) - {"id"}, {
            "sport", "age", "height", "weight", "injuries", "goal",
            "training_plan", "nutrition_plan", "recovery_plan",
        })
        self.assertEqual(record["recovery_plan"], plan.recovery)
        self.assertEqual(self.service.get_record(record["id"]), record)
        self.assertEqual(self.service.list_records(), [record])

    def test_persist_error_propagates(self):
        service = PlanServiceClient(self.client, InMemoryRepository(error=PermissionError("read-only")))
        with self.assertRaises(PermissionError):
            service.persist(AthleteProfile.from_form(SOCCER_FORM), GeneratedPlan.from_response("text"))


class TestTrainingPlanRepository(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "data" / "training_plans.json"
        self.repo = TrainingPlanRepository(self.path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_missing_file_reads_empty(self):
        self.assertEqual(self.repo.list(), [])
        self.assertIsNone(self.repo.get("nope"))

    def test_create_assigns_id_and_date(self):
        first = self.repo.create({"sport": "Soccer", "training_plan": "A"})
        second = self.repo.create({"sport": "Tennis", "training_plan": "B"})
        self.assertNotEqual(first["id"], second["id"])
        self.assertIn("created_date", first)
        self.assertEqual(self.repo.get(second["id"])["sport"], "Tennis")
        with open(self.path, encoding="utf-8") as f:
            self.assertEqual(json.load(f), [first, second])
        leftovers = [p.name for p in self.path.parent.iterdir() if p.name.startswith(".plans_")]
        self.assertEqual(leftovers, [])

    def test_corrupt_file_reads_empty(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("{not json", encoding="utf-8")
        self.assertEqual(self.repo.list(), [])


class TestHostedPlanRepository(unittest.TestCase):

    def _repo(self, handler):
        client = httpx.Client(base_url="https://store.test/api/apps/coach", transport=httpx.MockTransport(handler))
        return HostedPlanRepository("https://store.test/api/apps/coach", client=client)

    def test_create_posts_record(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": "rec-1", **seen["body"]})

        repo = self._repo(handler)
        stored = repo.create({"sport": "Soccer", "training_plan": "A"})
        self.assertEqual(seen["method"], "POST")
        self.assertEqual(seen["path"], "/api/apps/coach/entities/TrainingPlan")
        self.assertEqual(seen["body"], {"sport": "Soccer", "training_plan": "A"})
        self.assertEqual(stored["id"], "rec-1")

    def test_write_error_raises(self):
        repo = self._repo(lambda request: httpx.Response(503, json={"error": "unavailable"}))
        with self.assertRaises(httpx.HTTPStatusError):
            repo.create({"sport": "Soccer"})

    def test_get_missing_record_returns_none(self):
        repo = self._repo(lambda request: httpx.Response(404, json={"error": "not found"}))
        self.assertIsNone(repo.get("missing"))

    def test_list_records(self):
        repo = self._repo(lambda request: httpx.Response(200, json=[{"id": "rec-1"}]))
        self.assertEqual(repo.list(), [{"id": "rec-1"}])


if __name__ == '__main__':
    unittest.main()
