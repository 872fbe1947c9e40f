"""
Padrão Proxy para cache de downloads

O download é uma operação pesada. O proxy guarda o resultado de cada caminho
e devolve o arquivo em cache nas requisições seguintes, sem alterar o
downloader real.
"""
import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class Downloader(ABC):
    """Interface Subject comum ao downloader real e ao proxy"""

    @abstractmethod
    def baixar(self, caminho: str) -> Optional[str]:
        pass


class DownloaderArquivos(Downloader):
    """Real Subject - faz o trabalho pesado a cada chamada"""

    def baixar(self, caminho: str) -> Optional[str]:
        print(f"[Downloader] Baixando {caminho}...")
        return f"conteúdo de {caminho}"


class DownloaderProxy(Downloader):
    """Proxy com cache ilimitado, sem política de expiração"""

    def __init__(self, downloader: Optional[Downloader] = None):
        self._downloader = downloader if downloader is not None else DownloaderArquivos()
        self._arquivos_em_cache: Dict[str, Optional[str]] = {}
        self._lock = threading.Lock()

    def baixar(self, caminho: str) -> Optional[str]:
        with self._lock:
            if caminho in self._arquivos_em_cache:
                print(f"[Proxy] Lendo {caminho} do cache")
                return self._arquivos_em_cache[caminho]

            resultado = self._downloader.baixar(caminho)
            # Guarda mesmo resultado vazio: o download já aconteceu
            self._arquivos_em_cache[caminho] = resultado
            logger.debug(f"Arquivo {caminho} armazenado em cache ({len(self._arquivos_em_cache)} no total)")
            return resultado

    def em_cache(self, caminho: str) -> bool:
        return caminho in self._arquivos_em_cache

    def __len__(self) -> int:
        return len(self._arquivos_em_cache)
