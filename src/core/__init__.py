"""
Infraestrutura comum: configuração e logging
"""
from .config import LOG_LEVEL, get_configuracoes_padrao
from .logging_config import configurar_logging

__all__ = [
    'LOG_LEVEL',
    'get_configuracoes_padrao',
    'configurar_logging'
]
