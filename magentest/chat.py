"""Conversation state behind the chat page.

A :class:`Conversation` owns the ordered list of turns, the input buffer and
the in-flight flag. The page renders whatever the conversation holds and
hooks into :meth:`Conversation.subscribe` to be told about new turns.
"""

import itertools
import logging
from typing import Callable, Dict, List, Optional, Tuple

from magentest.ai_service import AIService, ClientFailure
from magentest.config import Settings, get_settings
from magentest.labels import get_labels
from magentest.models import ChatTurn, Language, Role, TestCaseRequest, TestCaseResponse

logger = logging.getLogger(__name__)

TurnListener = Callable[[ChatTurn], None]


class Conversation:
    def __init__(self, client=None, settings: Optional[Settings] = None, language=None):
        settings = settings or get_settings()
        self.client = client if client is not None else AIService(settings=settings)
        self.language = Language(language or settings.default_language)
        self.output_format = settings.output_format
        self.code_target = settings.code_target

        self.input_value = ""
        self.is_loading = False
        self._turns: List[ChatTurn] = []
        self._ids = itertools.count(1)
        self._listeners: List[TurnListener] = []

    @property
    def turns(self) -> Tuple[ChatTurn, ...]:
        return tuple(self._turns)

    @property
    def labels(self) -> Dict[str, str]:
        return get_labels(self.language)

    def subscribe(self, listener: TurnListener):
        self._listeners.append(listener)

    def unsubscribe(self, listener: TurnListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def set_language(self, language):
        """Switch the locale used by later requests and by the page labels."""
        self.language = Language(language)

    def build_request(self, description: str) -> TestCaseRequest:
        return TestCaseRequest(
            descricao=description,
            formato=self.output_format,
            idioma=self.language,
            gerar_codigo=self.code_target,
        )

    def submit(self, text: Optional[str] = None) -> Optional[ChatTurn]:
        """Send the input buffer to the service and record both turns.

        Returns the assistant turn, or None when nothing was sent because the
        buffer is blank or a request is already in flight.
        """
        if text is not None and not self.is_loading:
            self.input_value = text
        if not self.input_value.strip() or self.is_loading:
            return None

        content = self.input_value
        request = self.build_request(content)
        labels = get_labels(request.idioma)

        self._append(Role.USER, content)
        self.is_loading = True
        try:
            outcome = self.client.generate(request)
        except ClientFailure as e:
            logger.warning("Test case generation failed: %s", e.message)
            outcome = e
        except Exception as e:
            logger.exception("Unexpected error while generating test cases")
            outcome = ClientFailure(str(e) or labels["unknown_error"])
        finally:
            self.is_loading = False
            self.input_value = ""

        if isinstance(outcome, ClientFailure):
            error = outcome.message if outcome.message.strip() else labels["unknown_error"]
            return self._append(Role.ASSISTANT, labels["apology"], error=error)
        return self._append(
            Role.ASSISTANT,
            labels["success"].format(count=len(outcome.casos)),
            data=outcome,
        )

    def _append(
        self,
        role: Role,
        content: str,
        data: Optional[TestCaseResponse] = None,
        error: Optional[str] = None,
    ) -> ChatTurn:
        turn = ChatTurn(id=str(next(self._ids)), role=role, content=content, data=data, error=error)
        self._turns.append(turn)
        for listener in list(self._listeners):
            try:
                listener(turn)
            except Exception:
                logger.exception("Turn listener %r failed", listener)
        return turn
