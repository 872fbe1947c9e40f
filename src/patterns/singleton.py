"""
Padrão Singleton para a configuração da aplicação
"""
import logging
import threading
from typing import Any, Dict

from core.config import get_configuracoes_padrao

logger = logging.getLogger(__name__)


class SingletonMeta(type):
    """
    Metaclass Singleton thread-safe.
    Argumentos passados ao construtor depois da primeira chamada não
    alteram a instância retornada.
    """

    _instances: Dict[type, Any] = {}
    _lock: threading.Lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[cls] = instance
        return cls._instances[cls]


class Configuracao(metaclass=SingletonMeta):
    """Configuração única, carregada uma vez dos arquivos/ambiente"""

    def __init__(self):
        self._itens: Dict[str, Any] = {}
        self._carregar()

    def _carregar(self):
        self._itens = dict(self._carregar_arquivos_configuracao())
        logger.info(f"Configuração carregada: {len(self._itens)} itens")

    def _carregar_arquivos_configuracao(self) -> Dict[str, Any]:
        return get_configuracoes_padrao()

    @classmethod
    def get_instance(cls) -> 'Configuracao':
        return cls()

    def get(self, chave: str, padrao: Any = None) -> Any:
        return self._itens.get(chave, padrao)

    def set(self, chave: str, valor: Any):
        self._itens[chave] = valor

    def reset(self):
        """Recarrega os valores originais; usar com cuidado, principalmente em testes"""
        self._carregar()
