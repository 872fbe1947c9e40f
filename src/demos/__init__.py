"""
Clientes de demonstração dos padrões GoF
"""
from .criacionais import (
    demo_factory_method, demo_abstract_factory, demo_builder,
    demo_prototype, demo_singleton
)
from .estruturais import (
    demo_adapter, demo_composite, demo_decorator, demo_proxy, demo_facade
)

# Nome do padrão -> cliente de demonstração
DEMOS = {
    "factory_method": demo_factory_method,
    "abstract_factory": demo_abstract_factory,
    "builder": demo_builder,
    "prototype": demo_prototype,
    "singleton": demo_singleton,
    "adapter": demo_adapter,
    "composite": demo_composite,
    "decorator": demo_decorator,
    "proxy": demo_proxy,
    "facade": demo_facade,
}

__all__ = [
    'DEMOS',
    'demo_factory_method',
    'demo_abstract_factory',
    'demo_builder',
    'demo_prototype',
    'demo_singleton',
    'demo_adapter',
    'demo_composite',
    'demo_decorator',
    'demo_proxy',
    'demo_facade'
]
