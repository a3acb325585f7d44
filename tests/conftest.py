"""Shared fixtures for the MagenTest test suite."""
import json

import pytest
import requests

from magentest.config import Settings
from magentest.models import TestCaseResponse

BASE_URL = "http://magentest.test"


def sample_payload(count=3, resumo="ok"):
    return {
        "casos": [
            {
                "id": f"CT-{number:03d}",
                "titulo": f"Caso {number}",
                "descricao": "Usuário informa credenciais válidas",
                "resultado_esperado": "Usuário autenticado",
                "tipo": "Funcional",
                "prioridade": "Alta",
            }
            for number in range(1, count + 1)
        ],
        "resumo": resumo,
        "tempo_processamento": 1234,
    }


def make_response(status_code, payload=None, text=None, reason="OK"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = f"{BASE_URL}/gerar-casos-texto"
    body = json.dumps(payload) if payload is not None else (text or "")
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeClient:
    """Records requests and replays queued outcomes (responses or exceptions)."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests = []
        self.on_call = None

    def generate(self, request):
        self.requests.append(request)
        if self.on_call is not None:
            self.on_call(request)
        outcome = self.outcomes.pop(0) if self.outcomes else TestCaseResponse.model_validate(sample_payload())
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture()
def settings():
    return Settings(api_base_url=BASE_URL, request_timeout=30)


@pytest.fixture()
def fake_client():
    return FakeClient()
