"""
Puerto de salida: Respuesta alternativa para mensajes no reconocidos.

Cuando el parser devuelve UNRECOGNIZED, el dispatcher puede delegar el
mensaje a un "respondedor" externo (un modelo de lenguaje) que conversa
con el usuario y lo orienta hacia los comandos válidos.

El respondedor es OPCIONAL. Sin él, el dispatcher devuelve la ayuda
estática. Si el respondedor falla, también.

La implementación es dueña del historial por conversación: el dominio
solo pasa el mensaje y el identificador del chat.
"""

from abc import ABC, abstractmethod


class FallbackResponder(ABC):
    """Interfaz para el respondedor de mensajes libres."""

    @abstractmethod
    def respond(self, message: str, conversation_id: str) -> str:
        """Genera una respuesta para un mensaje que no es un comando.

        Args:
            message: Texto original del usuario.
            conversation_id: Identificador del chat (para el historial).

        Returns:
            Texto de respuesta listo para enviar.

        Raises:
            Exception: Cualquier falla del servicio externo. El dispatcher
                       la captura y responde con la ayuda estática.
        """
        ...
