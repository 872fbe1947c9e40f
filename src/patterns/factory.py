"""
Padrão Factory Method para entregas

Cada tipo de entrega decide qual veículo criar; o fluxo da entrega
(criar veículo e movê-lo) fica na classe base.
"""
from abc import ABC, abstractmethod
from typing import Dict, Optional


class Veiculo(ABC):
    """Interface Product"""

    @abstractmethod
    def set_modo(self, modo: str):
        pass

    @abstractmethod
    def mover(self) -> str:
        pass


class Bicicleta(Veiculo):
    def __init__(self):
        self.modo = None

    def set_modo(self, modo: str):
        self.modo = modo

    def mover(self) -> str:
        mensagem = "Entregando de bicicleta"
        print(f"[Entrega] {mensagem}")
        return mensagem


class Carro(Veiculo):
    def __init__(self):
        self.modo = None
        self.cor = None

    def set_modo(self, modo: str):
        self.modo = modo

    def set_cor(self, cor: str):
        self.cor = cor

    def mover(self) -> str:
        mensagem = "Entregando de carro"
        print(f"[Entrega] {mensagem}")
        return mensagem


class Entrega(ABC):
    """Creator - declara o Factory Method"""

    @abstractmethod
    def criar_veiculo(self) -> Veiculo:
        pass

    def executar(self) -> str:
        """Cria o veículo pelo Factory Method e realiza a entrega"""
        veiculo = self.criar_veiculo()
        return veiculo.mover()


class EntregaBicicleta(Entrega):
    """Creator concreto para entregas de bicicleta"""

    def criar_veiculo(self) -> Veiculo:
        bicicleta = Bicicleta()
        bicicleta.set_modo("eco")
        return bicicleta


class EntregaCarro(Entrega):
    """Creator concreto para entregas de carro"""

    def criar_veiculo(self) -> Veiculo:
        carro = Carro()
        carro.set_cor("verde")
        return carro


class EntregaFactorySelector:
    """Selector para escolher o tipo de entrega"""

    _entregas: Dict[str, type] = {
        "bicicleta": EntregaBicicleta,
        "carro": EntregaCarro
    }

    @classmethod
    def obter_entrega(cls, tipo: str) -> Optional[Entrega]:
        """Obtém entrega baseada no tipo, ou None se desconhecido"""
        entrega_class = cls._entregas.get(tipo.lower())
        if entrega_class:
            return entrega_class()
        return None

    @classmethod
    def get_tipos_disponiveis(cls) -> list:
        return list(cls._entregas.keys())
