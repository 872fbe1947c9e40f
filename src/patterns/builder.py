"""
Padrão Builder para montagem de queries

A mesma sequência de passos (tabela, filtros, colunas, limite) produz
queries diferentes conforme o builder concreto.
"""
import json
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple, Type, Union

Valor = Union[int, float, str]


class QueryBuilder(ABC):
    """Interface Builder com métodos encadeáveis"""

    def __init__(self):
        self._tabela: Optional[str] = None
        self._colunas: List[str] = []
        self._filtros: List[Tuple[str, Valor]] = []
        self._limite: Optional[int] = None

    def tabela(self, tabela: str) -> 'QueryBuilder':
        self._tabela = tabela
        return self

    def selecionar(self, colunas: List[str]) -> 'QueryBuilder':
        self._colunas = list(colunas)
        return self

    def limite(self, valor: int) -> 'QueryBuilder':
        self._limite = valor
        return self

    def onde(self, coluna: str, valor: Valor) -> 'QueryBuilder':
        self._filtros.append((coluna, valor))
        return self

    def get_query(self) -> str:
        if not self._tabela:
            raise ValueError("Tabela não definida para a query")
        return self._montar()

    @abstractmethod
    def _montar(self) -> str:
        pass


class MySqlQueryBuilder(QueryBuilder):
    """Builder concreto para MySQL"""

    @staticmethod
    def _formatar(valor: Valor) -> str:
        if isinstance(valor, str):
            return "'" + valor.replace("'", "''") + "'"
        return str(valor)

    def _montar(self) -> str:
        colunas = ", ".join(self._colunas) if self._colunas else "*"
        query = f"SELECT {colunas} FROM {self._tabela}"
        if self._filtros:
            condicoes = " AND ".join(
                f"{coluna} = {self._formatar(valor)}" for coluna, valor in self._filtros
            )
            query += f" WHERE {condicoes}"
        if self._limite is not None:
            query += f" LIMIT {self._limite}"
        return query


class MongoDbQueryBuilder(QueryBuilder):
    """Builder concreto para MongoDB"""

    def _filtro(self) -> dict:
        """Filtro plano; com coluna repetida, todas as condições vão em $and"""
        colunas = [coluna for coluna, _ in self._filtros]
        if len(set(colunas)) < len(colunas):
            return {"$and": [{coluna: valor} for coluna, valor in self._filtros]}
        return dict(self._filtros)

    def _montar(self) -> str:
        argumentos = [json.dumps(self._filtro(), ensure_ascii=False)]
        if self._colunas:
            argumentos.append(json.dumps({coluna: 1 for coluna in self._colunas}))
        query = f"db.{self._tabela}.find({', '.join(argumentos)})"
        if self._limite is not None:
            query += f".limit({self._limite})"
        return query


BUILDERS: Dict[str, Type[QueryBuilder]] = {
    "mysql": MySqlQueryBuilder,
    "mongodb": MongoDbQueryBuilder
}


def criar_builder(driver: str) -> QueryBuilder:
    """Cria o builder do driver configurado"""
    builder_class = BUILDERS.get(driver.lower())
    if builder_class is None:
        raise ValueError(f"Driver '{driver}' não suportado. Disponíveis: {', '.join(BUILDERS)}")
    return builder_class()
