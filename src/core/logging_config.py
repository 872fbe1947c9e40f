"""
Configuração de logging da aplicação
"""
import logging
from typing import Optional

from .config import LOG_LEVEL


def configurar_logging(nivel: Optional[str] = None):
    """Configura o logging raiz uma única vez"""
    nivel = (nivel or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, nivel, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
