"""
Testes dos padrões criacionais
"""
from concurrent.futures import ThreadPoolExecutor

import pytest

from patterns.factory import (
    Bicicleta, Carro, EntregaBicicleta, EntregaCarro, EntregaFactorySelector
)
from patterns.abstract_factory import (
    FabricaApple, FabricaSamsung, SmartphoneApple, TabletApple, SmartphoneSamsung, TabletSamsung
)
from patterns.builder import MySqlQueryBuilder, MongoDbQueryBuilder, criar_builder
from patterns.prototype import Livro
from patterns.singleton import Configuracao


# Factory Method

def test_entrega_de_carro_cria_carro_verde():
    veiculo = EntregaCarro().criar_veiculo()
    assert isinstance(veiculo, Carro)
    assert veiculo.cor == "verde"


def test_entrega_de_bicicleta_em_modo_eco(capsys):
    entrega = EntregaBicicleta()
    veiculo = entrega.criar_veiculo()
    assert isinstance(veiculo, Bicicleta)
    assert veiculo.modo == "eco"

    assert entrega.executar() == "Entregando de bicicleta"
    assert "[Entrega] Entregando de bicicleta" in capsys.readouterr().out


def test_selector_de_entregas():
    assert isinstance(EntregaFactorySelector.obter_entrega("Carro"), EntregaCarro)
    assert EntregaFactorySelector.obter_entrega("drone") is None
    assert EntregaFactorySelector.get_tipos_disponiveis() == ["bicicleta", "carro"]


# Abstract Factory

def test_fabricas_criam_familias_consistentes():
    apple = FabricaApple()
    samsung = FabricaSamsung()

    assert isinstance(apple.criar_smartphone(), SmartphoneApple)
    assert isinstance(apple.criar_tablet(), TabletApple)
    assert isinstance(samsung.criar_smartphone(), SmartphoneSamsung)
    assert isinstance(samsung.criar_tablet(), TabletSamsung)


def test_dispositivos_ligam_e_tocam(capsys):
    smartphone = FabricaSamsung().criar_smartphone()

    assert smartphone.ligar() is True
    assert smartphone.tocar() == "Smartphone Samsung: Tocando"
    assert "Smartphone Samsung: Ligando" in capsys.readouterr().out


# Builder

def test_mysql_builder():
    query = MySqlQueryBuilder().tabela("posts") \
        .onde("id", 429) \
        .limite(10) \
        .selecionar(["id", "title"]) \
        .get_query()

    assert query == "SELECT id, title FROM posts WHERE id = 429 LIMIT 10"


def test_mysql_builder_escapa_strings_e_usa_asterisco():
    query = MySqlQueryBuilder().tabela("autores") \
        .onde("nome", "O'Brien") \
        .onde("ativo", 1) \
        .get_query()

    assert query == "SELECT * FROM autores WHERE nome = 'O''Brien' AND ativo = 1"


def test_mongodb_builder():
    query = MongoDbQueryBuilder().tabela("posts") \
        .onde("id", 429) \
        .limite(10) \
        .selecionar(["id", "title"]) \
        .get_query()

    assert query == 'db.posts.find({"id": 429}, {"id": 1, "title": 1}).limit(10)'


def test_coluna_repetida_mantem_todas_as_condicoes():
    def montar(builder):
        return builder.tabela("t").onde("id", 1).onde("id", 2).get_query()

    assert montar(MySqlQueryBuilder()) == "SELECT * FROM t WHERE id = 1 AND id = 2"
    assert montar(MongoDbQueryBuilder()) == 'db.t.find({"$and": [{"id": 1}, {"id": 2}]})'


def test_builder_sem_tabela():
    with pytest.raises(ValueError):
        MongoDbQueryBuilder().onde("id", 1).get_query()


def test_criar_builder_por_driver():
    assert isinstance(criar_builder("MongoDB"), MongoDbQueryBuilder)
    with pytest.raises(ValueError, match="não suportado"):
        criar_builder("oracle")


# Prototype

def test_clone_reaproveita_conteudo(capsys):
    original = Livro("Python Divertido", 36)
    assert capsys.readouterr().out.count("[Banco]") == 1

    clone = original.clonar()

    assert capsys.readouterr().out == "", "O clone não deve consultar o banco"
    assert original.get_conteudo() == "O conteúdo do livro"
    assert clone.get_conteudo() == "O conteúdo do livro (em cache)"
    assert clone is not original
    assert (clone.titulo, clone.preco) == (original.titulo, original.preco)


# Singleton

def test_singleton_unicidade():
    config1 = Configuracao.get_instance()
    config2 = Configuracao()

    assert config1 is config2, "Configuracao não é a mesma instância!"


def test_singleton_compartilha_alteracoes():
    Configuracao.get_instance().set("app_locale", "pt")
    assert Configuracao.get_instance().get("app_locale") == "pt"


def test_singleton_valores_padrao():
    config = Configuracao.get_instance()
    assert config.get("app_locale") == "en"
    assert config.get("db_port") == "3306"
    assert config.get("inexistente", "padrao") == "padrao"


def test_singleton_le_ambiente(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.interno")
    config = Configuracao.get_instance()
    config.reset()

    assert config.get("db_host") == "db.interno"


def test_singleton_thread_safe():
    with ThreadPoolExecutor(max_workers=10) as executor:
        instancias = list(executor.map(lambda _: Configuracao.get_instance(), range(20)))

    assert len(set(id(instancia) for instancia in instancias)) == 1
