import pytest

from patterns.singleton import Configuracao


@pytest.fixture(autouse=True)
def configuracao_limpa():
    """Cada teste começa com a configuração recarregada do ambiente"""
    config = Configuracao.get_instance()
    config.reset()
    yield config
