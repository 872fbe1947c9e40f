"""
Padrão Composite para a árvore de órgãos de uma organização

Departamentos (órgãos compostos) contêm outros departamentos e funcionários
(órgãos simples). O cliente consulta informação e receita da organização
inteira sem distinguir folhas de containers.
"""
import random
from abc import ABC, abstractmethod
from typing import Callable, List, Optional

RECEITA_MINIMA = 1000
RECEITA_MAXIMA = 10999


def gerar_receita_aleatoria() -> int:
    """Receita diária simulada, sempre em [RECEITA_MINIMA, RECEITA_MAXIMA]"""
    return random.randint(RECEITA_MINIMA, RECEITA_MAXIMA)


class Orgao(ABC):
    """Interface Component do padrão Composite"""

    @abstractmethod
    def get_informacao(self) -> str:
        pass

    @abstractmethod
    def get_receita(self) -> int:
        pass

    def adicionar(self, orgao: 'Orgao'):
        """Órgãos compostos sobrescrevem; nas folhas é ignorado"""
        pass

    def remover(self, orgao: 'Orgao'):
        pass


class OrgaoSimples(Orgao):
    """Leaf - funcionário, fim da árvore"""

    def __init__(self, nome: str, gerador_receita: Optional[Callable[[], int]] = None):
        self.nome = nome
        self._gerador_receita = gerador_receita or gerar_receita_aleatoria

    def get_informacao(self) -> str:
        return f"- Meu nome é {self.nome}\n"

    def get_receita(self) -> int:
        # Gerada a cada chamada, não é armazenada
        return self._gerador_receita()


class OrgaoComposto(Orgao):
    """Container - departamento que agrega outros órgãos"""

    def __init__(self, nome: str):
        self.nome = nome
        self.filhos: List[Orgao] = []

    def get_informacao(self) -> str:
        """Cabeçalho do próprio órgão seguido da informação de cada filho"""
        saida = f"- Este é o órgão {self.nome}. Ele contém {len(self.filhos)} membros\n"
        for orgao in self.filhos:
            saida += orgao.get_informacao()
        return saida

    def get_receita(self) -> int:
        """Soma a receita de toda a subárvore"""
        return sum(orgao.get_receita() for orgao in self.filhos)

    def adicionar(self, orgao: Orgao):
        self.filhos.append(orgao)

    def remover(self, orgao: Orgao):
        """Remove a primeira ocorrência da mesma referência, se existir"""
        for indice, filho in enumerate(self.filhos):
            if filho is orgao:
                del self.filhos[indice]
                return

    def __len__(self) -> int:
        return len(self.filhos)


def montar_organizacao() -> OrgaoComposto:
    """Monta a organização de exemplo"""
    organizacao = OrgaoComposto("Principal")
    organizacao.adicionar(OrgaoSimples("Alex como Fundador"))
    organizacao.adicionar(OrgaoSimples("Morgan como RH"))

    diretoria = OrgaoComposto("Diretoria")
    diretoria.adicionar(OrgaoSimples("John como CEO"))
    diretoria.adicionar(OrgaoSimples("John como CTO"))
    organizacao.adicionar(diretoria)

    funcionarios = OrgaoComposto("Funcionários")
    ti = OrgaoComposto("TI")
    designers = OrgaoComposto("Designers")
    for nome in ("Sarah", "John", "Emily", "Mario"):
        designers.adicionar(OrgaoSimples(f"{nome} como Designer"))

    ti.adicionar(designers)
    funcionarios.adicionar(ti)
    organizacao.adicionar(funcionarios)
    return organizacao
