"""
Adaptador de salida: Respondedor con OpenAI.

Implementación de FallbackResponder que conversa con el usuario cuando
el mensaje no es un comando ("oi", "gastei 432 reais hoje", "como
economizar?") y lo orienta hacia los comandos del bot.

Historial POR CONVERSACIÓN:
- Empieza con el prompt de sistema.
- Se recorta a los últimos `max_history` mensajes (más el prompt).
- Se descarta tras `context_timeout_minutes` sin actividad.

El respondedor nunca ejecuta comandos: solo conversa.
"""

import threading
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

from openai import AuthenticationError, OpenAIError, RateLimitError

from ledger_bot.domain.ports.fallback_responder import FallbackResponder

SYSTEM_PROMPT = """Você é um assistente virtual integrado a um bot de controle financeiro no WhatsApp.

**SEU PAPEL:**
- Você conversa naturalmente com o usuário quando ele NÃO está usando comandos financeiros
- Seja amigável, prestativo e conciso nas respostas
- Use emojis quando apropriado para deixar a conversa mais leve
- Mantenha respostas curtas (máx. 3-4 linhas no WhatsApp)

**CONTEXTO DO BOT:**
O bot principal registra transações financeiras em uma planilha com comandos como:
- "entrada 200" - Registra uma entrada
- "saida 50" - Registra uma saída
- "diario 87,10" - Registra gasto diário
- "saldo" - Mostra resumo do dia
- "mes" - Mostra resumo do mês
- "ajuda" - Lista comandos disponíveis

**QUANDO O USUÁRIO FALAR COM VOCÊ:**
- Se ele perguntar sobre finanças ou quiser registrar algo, explique gentilmente como usar os comandos
- Se for apenas conversa casual ("oi", "como vai"), responda naturalmente
- Se pedir ajuda financeira, dê dicas gerais mas sugira usar os comandos do bot
- NUNCA tente executar comandos financeiros - você apenas conversa

**TOM DE VOZ:**
Amigável, informal mas respeitoso. Pense como um assistente prestativo do WhatsApp."""

NOT_RECOGNIZED_MESSAGE = """⚠️ Comando não reconhecido.

💡 Digite "ajuda" para ver os comandos disponíveis."""

AUTH_ERROR_MESSAGE = """⚠️ Erro de autenticação da IA.

Verifique a OPENAI_API_KEY.

💡 Digite "ajuda" para ver os comandos disponíveis."""

RATE_LIMIT_MESSAGE = """⚠️ Limite de uso da IA atingido.

Tente novamente em alguns instantes.

💡 Digite "ajuda" para ver os comandos disponíveis."""


class _Conversation:
    """Historial de un chat."""

    def __init__(self, now: datetime) -> None:
        self.messages: list[dict] = [{"role": "system", "content": SYSTEM_PROMPT}]
        self.last_activity = now


class OpenAIResponder(FallbackResponder):
    """Respondedor basado en chat completions de OpenAI."""

    def __init__(
        self,
        client,
        model: str = "gpt-4o-mini",
        max_history: int = 10,
        context_timeout_minutes: int = 30,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """
        Args:
            client: Cliente de OpenAI (Settings.get_openai_client()).
            model: Modelo de chat a usar.
            max_history: Mensajes que se conservan además del prompt de sistema.
            context_timeout_minutes: Minutos de inactividad tras los que se
                                     descarta el historial de un chat.
            clock: Reloj para medir la inactividad. Los tests inyectan uno fijo.
        """
        if max_history < 1:
            raise ValueError(f"max_history debe ser >= 1, recibió {max_history}")
        self._client = client
        self._model = model
        self._max_history = max_history
        self._timeout = timedelta(minutes=context_timeout_minutes)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._conversations: dict[str, _Conversation] = {}
        self._lock = threading.Lock()

    def respond(self, message: str, conversation_id: str) -> str:
        now = self._clock()
        with self._lock:
            self._cleanup(now)
            conversation = self._get_conversation(conversation_id, now)
            self._append(conversation, "user", message, now)
            messages = list(conversation.messages)

        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=messages,
                temperature=0.7,
                max_tokens=300,
            )
        except AuthenticationError:
            return AUTH_ERROR_MESSAGE
        except RateLimitError:
            return RATE_LIMIT_MESSAGE
        except OpenAIError:
            return NOT_RECOGNIZED_MESSAGE

        respuesta = (response.choices[0].message.content or "").strip()
        if not respuesta:
            return NOT_RECOGNIZED_MESSAGE

        with self._lock:
            conversation = self._get_conversation(conversation_id, self._clock())
            self._append(conversation, "assistant", respuesta, self._clock())

        return respuesta

    def history(self, conversation_id: str) -> list[dict]:
        """Copia del historial de un chat (incluye el prompt de sistema)."""
        with self._lock:
            conversation = self._conversations.get(conversation_id)
            return list(conversation.messages) if conversation else []

    def clear_history(self, conversation_id: str) -> None:
        with self._lock:
            self._conversations.pop(conversation_id, None)

    def reset_all_conversations(self) -> None:
        with self._lock:
            self._conversations.clear()

    def get_stats(self) -> dict:
        with self._lock:
            return {
                "provider": "openai",
                "model": self._model,
                "active_conversations": len(self._conversations),
            }

    # =================================================================
    # MÉTODOS PRIVADOS (llamar con el lock tomado)
    # =================================================================

    def _get_conversation(self, conversation_id: str, now: datetime) -> _Conversation:
        conversation = self._conversations.get(conversation_id)
        if conversation is None or now - conversation.last_activity > self._timeout:
            conversation = _Conversation(now)
            self._conversations[conversation_id] = conversation
        return conversation

    def _append(self, conversation: _Conversation, role: str, content: str, now: datetime) -> None:
        conversation.messages.append({"role": role, "content": content})
        conversation.last_activity = now
        if len(conversation.messages) > self._max_history + 1:
            # +1 por el prompt de sistema
            conversation.messages = [conversation.messages[0]] + conversation.messages[
                -self._max_history :
            ]

    def _cleanup(self, now: datetime) -> None:
        vencidas = [
            cid
            for cid, conv in self._conversations.items()
            if now - conv.last_activity > self._timeout
        ]
        for cid in vencidas:
            del self._conversations[cid]
