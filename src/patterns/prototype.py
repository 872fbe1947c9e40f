"""
Padrão Prototype para cópia de livros

Carregar o conteúdo do banco é caro; o clone reaproveita o conteúdo já
carregado do original.
"""
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Prototype(ABC, Generic[T]):
    @abstractmethod
    def clonar(self) -> T:
        pass


class Livro(Prototype['Livro']):
    def __init__(self, titulo: str, preco: float, conteudo: Optional[str] = None):
        self.titulo = titulo
        self.preco = preco
        self.conteudo = conteudo if conteudo is not None else self.buscar_conteudo_no_banco()

    def clonar(self) -> 'Livro':
        return Livro(self.titulo, self.preco, self.conteudo + " (em cache)")

    def buscar_conteudo_no_banco(self) -> str:
        """Simula a leitura do conteúdo no banco"""
        print(f"[Banco] Buscando conteúdo de '{self.titulo}'")
        return "O conteúdo do livro"

    def get_conteudo(self) -> str:
        return self.conteudo
