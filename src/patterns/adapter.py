"""
Padrão Adapter para notificações

O serviço de SMS de terceiros tem uma interface própria; o adaptador o
expõe como uma Notificacao comum.
"""
from abc import ABC, abstractmethod
from typing import List


class Notificacao(ABC):
    """Interface Target"""

    @abstractmethod
    def enviar(self) -> str:
        pass


class ServicoSmsXyz:
    """Adaptee - biblioteca externa de SMS (simulada)"""

    def __init__(self):
        self.etapas: List[str] = []

    def login(self):
        self.etapas.append("login")

    def set_porta(self, porta: int = 8080):
        self.etapas.append(f"porta {porta}")

    def enviar_sms(self) -> str:
        self.etapas.append("enviar_sms")
        print("[SMS] Enviando SMS")
        return "SMS"


class AdaptadorSmsXyz(Notificacao):
    """Adapter - traduz enviar() para a sequência do serviço XYZ"""

    def __init__(self, servico: ServicoSmsXyz):
        self._servico = servico

    def enviar(self) -> str:
        self._servico.login()
        self._servico.set_porta()
        return self._servico.enviar_sms()


class NotificacaoEmail(Notificacao):
    def enviar(self) -> str:
        print("[Email] Enviando Email")
        return "Email"


def notificar_usuarios(notificador: Notificacao) -> str:
    """Cliente - conhece apenas a interface Notificacao"""
    return notificador.enviar()
