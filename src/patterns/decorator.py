from abc import ABC, abstractmethod


class ComponenteQuarto(ABC):
    """Interface Component do padrão Decorator"""

    @abstractmethod
    def get_descricao(self) -> str:
        pass

    @abstractmethod
    def get_preco(self) -> float:
        pass


class QuartoSimples(ComponenteQuarto):
    """Quarto concreto, sem adicionais"""

    def __init__(self, descricao: str = "Quarto base", preco: float = 2.0):
        self._descricao = descricao
        self._preco = preco

    def get_descricao(self) -> str:
        return self._descricao

    def get_preco(self) -> float:
        return self._preco


class QuartoDecorator(ComponenteQuarto):
    """Decorator base para adicionais do quarto"""

    def __init__(self, quarto: ComponenteQuarto):
        self._quarto = quarto

    def get_descricao(self) -> str:
        return self._quarto.get_descricao()

    def get_preco(self) -> float:
        return self._quarto.get_preco()


# Decorators concretos para adicionais
class WiFi(QuartoDecorator):
    def get_descricao(self) -> str:
        return super().get_descricao() + " + WiFi"

    def get_preco(self) -> float:
        return super().get_preco() + 0.2


class CafeDaManha(QuartoDecorator):
    def get_descricao(self) -> str:
        return super().get_descricao() + " + Café da manhã"

    def get_preco(self) -> float:
        return super().get_preco() + 2.00


class AdicionalPersonalizado(QuartoDecorator):
    """Decorator genérico para adicionais dinâmicos"""

    def __init__(self, quarto: ComponenteQuarto, adicional: str, preco_adicional: float = 0.0):
        super().__init__(quarto)
        self._adicional = adicional
        self._preco_adicional = preco_adicional

    def get_descricao(self) -> str:
        return f"{super().get_descricao()} + {self._adicional}"

    def get_preco(self) -> float:
        return super().get_preco() + self._preco_adicional
