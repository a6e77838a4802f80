from __future__ import annotations

import io
import unittest

from fastapi.testclient import TestClient

from headache import StepLimitExceeded
from headache.webui import create_app
from headache.webui.app import BoundedExecutor


class WebUIApiTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(create_app())

    def test_run_returns_output(self) -> None:
        response = self.client.post("/api/run", json={"code": ",+.", "input": "a"})
        self.assertEqual(response.status_code, 200, response.text)
        payload = response.json()
        self.assertTrue(payload["ok"])
        self.assertEqual(payload["output"], "b")
        self.assertEqual(payload["output_bytes"], [98])
        self.assertIsNone(payload["error"])

    def test_run_reports_runtime_error_with_partial_output(self) -> None:
        response = self.client.post("/api/run", json={"code": "+.<"})
        self.assertEqual(response.status_code, 200, response.text)
        payload = response.json()
        self.assertFalse(payload["ok"])
        self.assertEqual(payload["output_bytes"], [1])
        self.assertEqual(payload["error"]["kind"], "pointer_underflow")
        self.assertEqual(payload["error"]["position"], 2)

    def test_run_reports_unbalanced_brackets(self) -> None:
        response = self.client.post("/api/run", json={"code": "+]"})
        payload = response.json()
        self.assertEqual(payload["error"]["kind"], "unbalanced_brackets")
        self.assertEqual(payload["error"]["position"], 1)
        self.assertEqual(payload["output"], "")

    def test_run_rejects_non_byte_input(self) -> None:
        response = self.client.post("/api/run", json={"code": ",.", "input": "€"})
        self.assertEqual(response.status_code, 422, response.text)

    def test_runaway_program_hits_step_limit(self) -> None:
        response = self.client.post("/api/run", json={"code": "+[]", "max_steps": 50})
        self.assertEqual(response.status_code, 409, response.text)
        self.assertIn("50 steps", response.json()["detail"])

    def test_program_within_step_limit_completes(self) -> None:
        response = self.client.post("/api/run", json={"code": "+++[-]+.", "max_steps": 12})
        self.assertEqual(response.status_code, 200, response.text)
        self.assertEqual(response.json()["output_bytes"], [1])

    def test_run_rejects_invalid_step_limit(self) -> None:
        response = self.client.post("/api/run", json={"code": "+", "max_steps": 0})
        self.assertEqual(response.status_code, 422, response.text)

    def test_bounded_executor_counts_each_run_separately(self) -> None:
        executor = BoundedExecutor(input=io.BytesIO(), output=io.BytesIO(), max_steps=3)
        self.assertTrue(executor.execute("+++").ok)
        self.assertTrue(executor.execute("---").ok)
        result = executor.execute("++++")
        self.assertIsInstance(result.error, StepLimitExceeded)
        self.assertEqual(result.error.position, 3)
        self.assertEqual(executor.tape[0], 3)

    def test_resolve_lists_pairs(self) -> None:
        response = self.client.post("/api/resolve", json={"code": "[[]]x[]"})
        self.assertEqual(response.status_code, 200, response.text)
        payload = response.json()
        self.assertTrue(payload["balanced"])
        self.assertEqual(payload["pairs"], [[0, 3], [1, 2], [5, 6]])

    def test_resolve_reports_unclosed_loop(self) -> None:
        response = self.client.post("/api/resolve", json={"code": "+[[]"})
        payload = response.json()
        self.assertFalse(payload["balanced"])
        self.assertEqual(payload["error"]["position"], 1)
        self.assertEqual(payload["pairs"], [])


if __name__ == "__main__":
    unittest.main()
