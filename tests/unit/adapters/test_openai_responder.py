"""
Tests para ledger_bot.adapters.output.responders.openai_responder

No se llama a la API: el cliente es un doble con la misma forma que
`OpenAI().chat.completions.create(...)`. Los errores de la API se
construyen con respuestas de httpx, como los arma la propia librería.
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError, AuthenticationError, RateLimitError

from ledger_bot.adapters.output.responders.openai_responder import (
    AUTH_ERROR_MESSAGE,
    NOT_RECOGNIZED_MESSAGE,
    RATE_LIMIT_MESSAGE,
    SYSTEM_PROMPT,
    OpenAIResponder,
)

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


class FakeCompletions:
    """Devuelve las respuestas (o lanza los errores) en orden."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=outcome))]
        )


class MutableClock:
    def __init__(self):
        self.now = datetime(2026, 10, 19, 15, 0, tzinfo=timezone.utc)

    def __call__(self):
        return self.now


def _responder(completions, **kwargs):
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return OpenAIResponder(client=client, **kwargs)


class TestRespuestas:
    def test_respuesta_normal(self):
        completions = FakeCompletions("  Olá! 👋  ")
        responder = _responder(completions, model="gpt-4o-mini")

        assert responder.respond("oi", "chat") == "Olá! 👋"

        llamada = completions.calls[0]
        assert llamada["model"] == "gpt-4o-mini"
        assert llamada["messages"] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "oi"},
        ]

    def test_respuesta_vacia(self):
        assert _responder(FakeCompletions(None)).respond("oi", "chat") == NOT_RECOGNIZED_MESSAGE

    def test_historial_por_conversacion(self):
        responder = _responder(FakeCompletions("r1", "r2"))
        responder.respond("m1", "a")
        responder.respond("m2", "b")

        assert [m["content"] for m in responder.history("a")[1:]] == ["m1", "r1"]
        assert [m["content"] for m in responder.history("b")[1:]] == ["m2", "r2"]
        assert responder.get_stats()["active_conversations"] == 2

    def test_historial_se_recorta(self):
        completions = FakeCompletions("r1", "r2")
        responder = _responder(completions, max_history=2)
        responder.respond("m1", "chat")
        responder.respond("m2", "chat")

        historial = responder.history("chat")
        assert historial[0]["role"] == "system"
        assert [m["content"] for m in historial[1:]] == ["m2", "r2"]
        assert [m["content"] for m in completions.calls[1]["messages"][1:]] == ["r1", "m2"]

    def test_inactividad_descarta_el_historial(self):
        clock = MutableClock()
        completions = FakeCompletions("r1", "r2")
        responder = _responder(completions, context_timeout_minutes=30, clock=clock)

        responder.respond("m1", "chat")
        clock.now += timedelta(minutes=31)
        responder.respond("m2", "chat")

        assert [m["content"] for m in completions.calls[1]["messages"][1:]] == ["m2"]

    def test_clear_y_reset(self):
        responder = _responder(FakeCompletions("r1", "r2"))
        responder.respond("m1", "a")
        responder.respond("m2", "b")

        responder.clear_history("a")
        assert responder.history("a") == []

        responder.reset_all_conversations()
        assert responder.get_stats()["active_conversations"] == 0

    def test_max_history_invalido(self):
        with pytest.raises(ValueError, match="max_history"):
            _responder(FakeCompletions(), max_history=0)


class TestErroresDeLaApi:
    def test_autenticacion(self):
        error = AuthenticationError(
            "invalid api key", response=httpx.Response(401, request=_REQUEST), body=None
        )
        assert _responder(FakeCompletions(error)).respond("oi", "chat") == AUTH_ERROR_MESSAGE

    def test_limite_de_uso(self):
        error = RateLimitError(
            "rate limit", response=httpx.Response(429, request=_REQUEST), body=None
        )
        assert _responder(FakeCompletions(error)).respond("oi", "chat") == RATE_LIMIT_MESSAGE

    def test_conexion(self):
        error = APIConnectionError(request=_REQUEST)
        assert _responder(FakeCompletions(error)).respond("oi", "chat") == NOT_RECOGNIZED_MESSAGE
