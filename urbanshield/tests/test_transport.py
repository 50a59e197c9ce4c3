import unittest
from unittest.mock import MagicMock, patch

import requests

from urbanshield.core.api.models import TransportResult
from urbanshield.core.api.transport import (UNKNOWN_ERROR,
                                            describe_transport_failure, submit)

ENDPOINT = "http://test.local/urbanshield/api/login.php"


def mock_response(status_code=200, text=""):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    return response


class TestDescribeTransportFailure(unittest.TestCase):
    def test_status_and_body(self):
        self.assertEqual(
            describe_transport_failure(status_code=500, body="Internal Error"),
            "Code: 500 | Response: Internal Error"
        )

    def test_status_takes_precedence_over_cause(self):
        diagnostic = describe_transport_failure(
            status_code=404, body="Not Found", cause=OSError("refused"), message="boom"
        )
        self.assertEqual(diagnostic, "Code: 404 | Response: Not Found")

    def test_status_with_empty_body(self):
        self.assertEqual(describe_transport_failure(status_code=502, body=""), "Code: 502 | Response: ")

    def test_cause(self):
        self.assertEqual(
            describe_transport_failure(cause=ConnectionRefusedError("Connection refused"), message="boom"),
            "Cause: ConnectionRefusedError: Connection refused"
        )

    def test_cause_without_text(self):
        self.assertEqual(describe_transport_failure(cause=TimeoutError()), "Cause: TimeoutError")

    def test_message(self):
        self.assertEqual(describe_transport_failure(message="Invalid URL"), "Invalid URL")

    def test_unknown(self):
        self.assertEqual(describe_transport_failure(), UNKNOWN_ERROR)
        self.assertEqual(describe_transport_failure(message=""), "Unknown error")


@patch("urbanshield.core.api.transport.requests.Session")
class TestSubmit(unittest.IsolatedAsyncioTestCase):
    def _session(self, mock_session_cls):
        return mock_session_cls.return_value.__enter__.return_value

    async def test_posts_form_encoded_payload(self, mock_session_cls):
        session = self._session(mock_session_cls)
        session.post.return_value = mock_response(200, '{"status": "success"}')

        result = await submit(ENDPOINT, {"email": "a@b.com", "password": "x"})

        self.assertEqual(result, TransportResult.success('{"status": "success"}'))
        session.post.assert_called_once_with(ENDPOINT, data={"email": "a@b.com", "password": "x"})

    async def test_new_session_per_submission(self, mock_session_cls):
        self._session(mock_session_cls).post.return_value = mock_response(200, "{}")

        await submit(ENDPOINT, {"email": "a@b.com"})
        await submit(ENDPOINT, {"email": "c@d.com"})

        self.assertEqual(mock_session_cls.call_count, 2)

    async def test_server_error(self, mock_session_cls):
        self._session(mock_session_cls).post.return_value = mock_response(500, "Internal Error")

        result = await submit(ENDPOINT, {"email": "a@b.com"})

        self.assertFalse(result.ok)
        self.assertEqual(result.diagnostic, "Code: 500 | Response: Internal Error")

    async def test_redirect_status_is_a_failure(self, mock_session_cls):
        self._session(mock_session_cls).post.return_value = mock_response(304, "")

        result = await submit(ENDPOINT, {"email": "a@b.com"})

        self.assertEqual(result.diagnostic, "Code: 304 | Response: ")

    async def test_connection_error_reports_cause(self, mock_session_cls):
        self._session(mock_session_cls).post.side_effect = requests.exceptions.ConnectionError(
            OSError("Network is unreachable")
        )

        result = await submit(ENDPOINT, {"email": "a@b.com"})

        self.assertFalse(result.ok)
        self.assertEqual(result.diagnostic, "Cause: OSError: Network is unreachable")

    async def test_error_with_message_only(self, mock_session_cls):
        self._session(mock_session_cls).post.side_effect = requests.exceptions.InvalidURL("Invalid URL 'x'")

        result = await submit(ENDPOINT, {"email": "a@b.com"})

        self.assertEqual(result.diagnostic, "Invalid URL 'x'")

    async def test_error_without_detail(self, mock_session_cls):
        self._session(mock_session_cls).post.side_effect = requests.exceptions.RequestException()

        result = await submit(ENDPOINT, {"email": "a@b.com"})

        self.assertEqual(result, TransportResult.failure("Unknown error"))

    async def test_payload_values_not_logged(self, mock_session_cls):
        self._session(mock_session_cls).post.return_value = mock_response(200, "{}")

        with self.assertLogs("urbanshield.core.api.transport", level="INFO") as logs:
            await submit(ENDPOINT, {"email": "a@b.com", "password": "hunter2"})

        self.assertNotIn("hunter2", "\n".join(logs.output))


if __name__ == '__main__':
    unittest.main()
