"""
Testes do executor das demonstrações
"""
from pathlib import Path
import importlib.util

import pytest

from demos import DEMOS


@pytest.fixture
def main():
    caminho = Path(__file__).parent.parent / "main.py"
    spec = importlib.util.spec_from_file_location("executor_main", caminho)
    modulo = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(modulo)
    return modulo.main


def test_todas_as_demonstracoes_registradas():
    assert set(DEMOS) == {
        "factory_method", "abstract_factory", "builder", "prototype", "singleton",
        "adapter", "composite", "decorator", "proxy", "facade"
    }


def test_executa_todas(main, capsys):
    assert main([]) == 0

    saida = capsys.readouterr().out
    for nome in DEMOS:
        assert f"🎯 {nome}" in saida


def test_demo_proxy(main, capsys):
    assert main(["proxy"]) == 0

    saida = capsys.readouterr().out
    assert saida.count("[Downloader] Baixando") == 1
    assert saida.count("do cache") == 4


def test_demo_composite(main, capsys):
    assert main(["composite"]) == 0

    saida = capsys.readouterr().out
    assert "- Este é o órgão Principal. Ele contém 4 membros" in saida
    assert "[Composite] Receita total:" in saida


def test_padrao_desconhecido(main, capsys):
    assert main(["observer"]) == 1
    assert "Padrão desconhecido: observer" in capsys.readouterr().out


def test_erro_na_demonstracao_retorna_1(main, monkeypatch, capsys):
    def demo_com_erro():
        raise ValueError("falhou")

    monkeypatch.setitem(DEMOS, "builder", demo_com_erro)

    assert main(["builder"]) == 1
    assert "❌ Erro na demonstração 'builder': falhou" in capsys.readouterr().out
