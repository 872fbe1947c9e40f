"""
Padrões GoF - exemplos didáticos
"""
from .factory import *
from .abstract_factory import *
from .builder import *
from .prototype import *
from .singleton import *
from .adapter import *
from .composite import *
from .decorator import *
from .proxy import *
from .facade import *

__all__ = [
    # Factory Method Pattern
    'Veiculo',
    'Bicicleta',
    'Carro',
    'Entrega',
    'EntregaBicicleta',
    'EntregaCarro',
    'EntregaFactorySelector',

    # Abstract Factory Pattern
    'Smartphone',
    'Tablet',
    'FabricaDispositivos',
    'FabricaApple',
    'FabricaSamsung',

    # Builder Pattern
    'QueryBuilder',
    'MySqlQueryBuilder',
    'MongoDbQueryBuilder',
    'BUILDERS',
    'criar_builder',

    # Prototype Pattern
    'Prototype',
    'Livro',

    # Singleton Pattern
    'SingletonMeta',
    'Configuracao',

    # Adapter Pattern
    'Notificacao',
    'ServicoSmsXyz',
    'AdaptadorSmsXyz',
    'NotificacaoEmail',
    'notificar_usuarios',

    # Composite Pattern
    'Orgao',
    'OrgaoSimples',
    'OrgaoComposto',
    'montar_organizacao',

    # Decorator Pattern
    'ComponenteQuarto',
    'QuartoSimples',
    'QuartoDecorator',
    'WiFi',
    'CafeDaManha',
    'AdicionalPersonalizado',
    'aplicar_adicionais',

    # Proxy Pattern
    'Downloader',
    'DownloaderArquivos',
    'DownloaderProxy',

    # Facade Pattern
    'MensagemSms',
    'BibliotecaSms',
    'SmsFacade'
]


# Função utilitária para aplicar adicionais (Decorator Pattern)
def aplicar_adicionais(quarto: 'ComponenteQuarto', adicionais: list) -> 'ComponenteQuarto':
    """Aplica uma lista de adicionais a um quarto usando os decorators apropriados.

    Cada adicional é um nome ou uma tupla (nome, preço); nomes sem decorator
    concreto viram AdicionalPersonalizado.
    """
    decorator_map = {
        "wifi": WiFi,
        "cafe da manha": CafeDaManha,
    }
    for adicional in adicionais:
        nome, preco = adicional if isinstance(adicional, tuple) else (adicional, 0.0)
        nome_norm = nome.strip().lower().replace("é", "e").replace("á", "a").replace("ã", "a").replace("-", "")
        decorator_class = decorator_map.get(nome_norm)
        if decorator_class:
            quarto = decorator_class(quarto)
        else:
            quarto = AdicionalPersonalizado(quarto, nome, preco)
    return quarto
