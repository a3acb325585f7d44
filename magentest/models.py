from datetime import datetime
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Language(str, Enum):
    PT = "pt"
    EN = "en"
    ES = "es"


class RequestEncoding(str, Enum):
    JSON = "json"
    FORM = "form"


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class TestCaseRequest(BaseModel):
    __test__ = False

    descricao: str
    formato: str = "Procedural"
    idioma: Language = Language.PT
    gerar_codigo: str = "Robotframework"

    @field_validator("descricao")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("descricao must not be empty")
        return value


class TestCase(BaseModel):
    __test__ = False

    # Extra keys sent by the service are kept as-is.
    model_config = ConfigDict(extra="allow")

    id: str
    titulo: str
    descricao: str
    resultado_esperado: str
    tipo: str
    prioridade: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_str(cls, value):
        return str(value) if isinstance(value, int) else value


class TestCaseResponse(BaseModel):
    __test__ = False

    model_config = ConfigDict(extra="allow")

    casos: List[TestCase] = Field(default_factory=list)
    resumo: Optional[str] = None
    tempo_processamento: float = 0


class ValidationErrorItem(BaseModel):
    loc: List[Union[str, int]] = Field(default_factory=list)
    msg: str
    type: str = ""


class ValidationErrorBody(BaseModel):
    detail: List[ValidationErrorItem]


class ChatTurn(BaseModel):
    """One entry of the conversation.

    Assistant turns carry either ``data`` or ``error``, never both. User
    turns carry neither.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    role: Role
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)
    data: Optional[TestCaseResponse] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_payload(self):
        if self.role is Role.ASSISTANT:
            if (self.data is None) == (self.error is None):
                raise ValueError("assistant turns need exactly one of data or error")
            if self.error is not None and not self.error.strip():
                raise ValueError("assistant error message must not be empty")
        elif self.data is not None or self.error is not None:
            raise ValueError("user turns cannot carry data or error")
        return self
