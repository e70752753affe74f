"""Client for the external text-generation service.

The summary feature forwards a student's details to a generation
service and relays the text it produces.  The request is a single
synchronous ``POST {base_url}/generate`` carrying the model name and a
prompt::

    {"model": "llama3", "prompt": "..."}

and the service is expected to answer with a JSON object holding a
``summary`` string.  There is no retry and no caching; any failure is
reported as :class:`SummaryGenerationFailed`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from student_records_api.app.core.errors import SummaryGenerationFailed
from student_records_api.app.schemas.student import StudentRead


logger = logging.getLogger(__name__)


PROMPT_TEMPLATE = (
    "Write a short, friendly summary of the following student profile "
    "in two or three sentences.\n"
    "Name: {name}\n"
    "Age: {age}\n"
    "Email: {email}\n"
)


class SummaryService:
    """Generate student summaries through a remote model."""

    def __init__(
        self,
        *,
        base_url: str,
        model_name: str,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the generation service, e.g.
                ``http://localhost:11434/api``.
            model_name: Model identifier sent with every request.
            timeout: Seconds to wait for a response.  ``None`` or ``0``
                waits indefinitely.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.model_name = model_name
        self.timeout = timeout or None
        self.session = session or requests.Session()

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/generate"

    @staticmethod
    def build_prompt(student: StudentRead) -> str:
        return PROMPT_TEMPLATE.format(name=student.name, age=student.age, email=student.email)

    def summarize(self, student: StudentRead) -> str:
        """Return the generated summary for ``student``.

        Raises:
            SummaryGenerationFailed: the request could not be sent, the
                service answered with a non-2xx status, or the body was
                not a JSON object with a string ``summary`` field.
        """
        payload: Dict[str, Any] = {"model": self.model_name, "prompt": self.build_prompt(student)}
        url = self.generate_url
        try:
            logger.debug("Requesting summary for student %s from %s", student.id, url)
            response = self.session.post(url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            logger.error("Summary service returned %s for student %s", status, student.id)
            raise SummaryGenerationFailed() from exc
        except requests.RequestException as exc:
            logger.error("Summary request for student %s failed: %s", student.id, exc)
            raise SummaryGenerationFailed() from exc

        try:
            body = response.json()
        except ValueError as exc:
            logger.error("Summary service sent a non-JSON body for student %s", student.id)
            raise SummaryGenerationFailed() from exc
        summary = body.get("summary") if isinstance(body, dict) else None
        if not isinstance(summary, str):
            logger.error("Summary service response for student %s has no summary field", student.id)
            raise SummaryGenerationFailed()
        return summary
