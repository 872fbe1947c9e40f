"""
Padrão Facade para envio de SMS

Esconde a configuração e a sequência de chamadas da biblioteca de SMS
atrás de um único método estático.
"""
import logging

from pydantic import BaseModel, Field

from .singleton import Configuracao

logger = logging.getLogger(__name__)


class MensagemSms(BaseModel):
    """Schema da mensagem enviada pela facade"""
    texto: str = Field(..., min_length=1, max_length=160)
    destinatario: str = Field(..., pattern=r"^\+\d{6,15}$")

    class Config:
        json_schema_extra = {
            "example": {
                "texto": "Bem-vindo!",
                "destinatario": "+5511999990000"
            }
        }


class BibliotecaSms:
    """Subsistema complexo (simulado)"""

    def __init__(self, client_id: str, client_secret: str, driver: str):
        self.client_id = client_id
        self.client_secret = client_secret
        self.driver = driver
        self._destinatario = None

    def destinatario(self, destinatario: str):
        self._destinatario = destinatario

    def enviar(self, texto: str) -> str:
        mensagem = f"SMS via {self.driver} para {self._destinatario}: {texto}"
        print(f"[SMS] {mensagem}")
        return mensagem


class SmsFacade:
    """Facade - ponto único para envio de SMS"""

    @staticmethod
    def enviar(texto: str, destinatario: str) -> str:
        mensagem = MensagemSms(texto=texto, destinatario=destinatario)
        config = Configuracao.get_instance()

        sms = BibliotecaSms(
            config.get("sms.client_id"),
            config.get("sms.client_secret"),
            config.get("sms.driver")
        )
        sms.destinatario(mensagem.destinatario)
        logger.debug(f"Enviando SMS para {mensagem.destinatario} via {sms.driver}")
        return sms.enviar(mensagem.texto)
