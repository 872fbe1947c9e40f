"""
Clientes dos padrões criacionais
"""
from patterns.factory import Entrega, EntregaCarro, EntregaBicicleta
from patterns.abstract_factory import FabricaDispositivos, FabricaSamsung
from patterns.builder import QueryBuilder, MySqlQueryBuilder, MongoDbQueryBuilder, criar_builder
from patterns.prototype import Livro
from patterns.singleton import Configuracao


def demo_factory_method():
    """Demonstração do padrão Factory Method"""
    def cliente(entrega: Entrega):
        entrega.executar()

    cliente(EntregaCarro())
    cliente(EntregaBicicleta())


def demo_abstract_factory():
    """Demonstração do padrão Abstract Factory"""
    def cliente(fabrica: FabricaDispositivos):
        smartphone = fabrica.criar_smartphone()
        smartphone.tocar()

        tablet = fabrica.criar_tablet()
        tablet.ligar()

    cliente(FabricaSamsung())


def demo_builder():
    """Demonstração do padrão Builder"""
    def cliente(builder: QueryBuilder):
        query = builder.tabela("posts") \
            .onde("id", 429) \
            .limite(10) \
            .selecionar(["id", "title"]) \
            .get_query()
        print(query)

    cliente(MongoDbQueryBuilder())
    cliente(MySqlQueryBuilder())

    # Builder escolhido pela configuração
    driver = Configuracao.get_instance().get("db_driver")
    print(f"[Builder] Driver configurado: {driver}")
    cliente(criar_builder(driver))


def demo_prototype():
    """Demonstração do padrão Prototype"""
    original = Livro("Python Divertido", 36)
    clone = original.clonar()

    print(original.get_conteudo())
    print(clone.get_conteudo())


def demo_singleton():
    """Demonstração do padrão Singleton"""
    config = Configuracao.get_instance()
    config.set("app_locale", "pt")

    config2 = Configuracao.get_instance()
    print(f"[Singleton] Mesma instância: {config is config2}")
    print(f"[Singleton] app_locale = {config2.get('app_locale')}")
    config.reset()
