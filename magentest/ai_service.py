"""Client for the remote test-case generation API."""

import logging
from typing import List, Optional

import requests

from magentest.config import Settings, get_settings
from magentest.labels import get_labels
from magentest.models import (
    RequestEncoding,
    TestCaseRequest,
    TestCaseResponse,
    ValidationErrorBody,
    ValidationErrorItem,
)

logger = logging.getLogger(__name__)

GENERATE_PATH = "/gerar-casos-texto"


class ClientFailure(Exception):
    """Base class for every failure reported by :class:`AIService`."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailure(ClientFailure):
    """The service rejected one or more request fields (HTTP 422)."""

    def __init__(self, details: List[ValidationErrorItem]):
        self.details = details
        super().__init__(", ".join(item.msg for item in details))


class TimeoutFailure(ClientFailure):
    pass


class TransportFailure(ClientFailure):
    pass


class AIService:
    """
    Wraps the single outbound call to the test-case generation endpoint.

    Every call performs exactly one POST. There are no retries, and a timeout
    is reported as :class:`TimeoutFailure` rather than retried.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        encoding: Optional[RequestEncoding] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.encoding = RequestEncoding(encoding or settings.request_encoding)
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return f"{self.base_url}{GENERATE_PATH}"

    def generate(self, request: TestCaseRequest) -> TestCaseResponse:
        payload = request.model_dump(mode="json")
        if self.encoding is RequestEncoding.JSON:
            body = {"json": payload}
        else:
            body = {"data": payload}

        logger.info(
            "POST %s (encoding=%s, idioma=%s)",
            self.url,
            self.encoding.value,
            request.idioma.value,
        )
        try:
            response = self.session.post(self.url, timeout=self.timeout, **body)
        except requests.Timeout as e:
            logger.warning("Request to %s timed out after %ss", self.url, self.timeout)
            raise TimeoutFailure(get_labels(request.idioma)["timeout"]) from e
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", self.url, e)
            raise TransportFailure(str(e)) from e

        if response.status_code == 422:
            details = _validation_details(response)
            if details is not None:
                logger.warning("Validation error from %s: %d field(s)", self.url, len(details))
                raise ValidationFailure(details)

        try:
            response.raise_for_status()
        except requests.HTTPError as e:
            logger.warning("HTTP error from %s: %s", self.url, e)
            raise TransportFailure(str(e)) from e

        try:
            return TestCaseResponse.model_validate(response.json())
        except ValueError as e:
            logger.warning("Unexpected response body from %s: %s", self.url, e)
            raise TransportFailure(f"Invalid response from {self.url}: {e}") from e

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


def _validation_details(response: requests.Response) -> Optional[List[ValidationErrorItem]]:
    try:
        details = ValidationErrorBody.model_validate(response.json()).detail
    except ValueError:
        return None
    return details or None


def generate_test_cases(request: TestCaseRequest, settings: Optional[Settings] = None) -> TestCaseResponse:
    """Perform one generation call with a client built from ``settings``."""
    with AIService(settings=settings) as service:
        return service.generate(request)
