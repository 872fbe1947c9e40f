"""
Padrão Abstract Factory para famílias de dispositivos
"""
from abc import ABC, abstractmethod


class Smartphone(ABC):
    @abstractmethod
    def ligar(self) -> bool:
        pass

    @abstractmethod
    def tocar(self) -> str:
        pass


class Tablet(ABC):
    @abstractmethod
    def ligar(self) -> bool:
        pass


class _Dispositivo:
    """Saída comum dos dispositivos concretos"""

    nome = ""

    def _log(self, acao: str) -> str:
        mensagem = f"{self.nome}: {acao}"
        print(f"[Dispositivo] {mensagem}")
        return mensagem


class SmartphoneApple(_Dispositivo, Smartphone):
    nome = "Smartphone Apple"

    def ligar(self) -> bool:
        self._log("Ligando")
        return True

    def tocar(self) -> str:
        return self._log("Tocando")


class SmartphoneSamsung(_Dispositivo, Smartphone):
    nome = "Smartphone Samsung"

    def ligar(self) -> bool:
        self._log("Ligando")
        return True

    def tocar(self) -> str:
        return self._log("Tocando")


class TabletApple(_Dispositivo, Tablet):
    nome = "Tablet Apple"

    def ligar(self) -> bool:
        self._log("Ligando")
        return True


class TabletSamsung(_Dispositivo, Tablet):
    nome = "Tablet Samsung"

    def ligar(self) -> bool:
        self._log("Ligando")
        return True


class FabricaDispositivos(ABC):
    """Abstract Factory - cria produtos da mesma família"""

    @abstractmethod
    def criar_smartphone(self) -> Smartphone:
        pass

    @abstractmethod
    def criar_tablet(self) -> Tablet:
        pass


class FabricaApple(FabricaDispositivos):
    def criar_smartphone(self) -> Smartphone:
        return SmartphoneApple()

    def criar_tablet(self) -> Tablet:
        return TabletApple()


class FabricaSamsung(FabricaDispositivos):
    def criar_smartphone(self) -> Smartphone:
        return SmartphoneSamsung()

    def criar_tablet(self) -> Tablet:
        return TabletSamsung()
