#!/usr/bin/env python3
"""
Executor das demonstrações dos Padrões GoF
Uso: python main.py [padrao ...]  (sem argumentos executa todos)
"""
import logging
import sys
from pathlib import Path

# Adicionar o diretório src ao path
sys.path.append(str(Path(__file__).parent / "src"))

from core.logging_config import configurar_logging
from demos import DEMOS

logger = logging.getLogger(__name__)


def main(argv=None):
    """Função principal"""
    configurar_logging()
    nomes = list(argv if argv is not None else sys.argv[1:]) or list(DEMOS)

    desconhecidos = [nome for nome in nomes if nome not in DEMOS]
    if desconhecidos:
        print(f"❌ Padrão desconhecido: {', '.join(desconhecidos)}")
        print(f"📚 Disponíveis: {', '.join(DEMOS)}")
        return 1

    print("🏛️ Padrões GoF - Demonstrações")
    print("=" * 60)

    codigo = 0
    for nome in nomes:
        print(f"\n🎯 {nome}")
        print("-" * 60)
        logger.debug(f"Iniciando demonstração '{nome}'")
        try:
            DEMOS[nome]()
        except ValueError as e:
            print(f"❌ Erro na demonstração '{nome}': {e}")
            codigo = 1

    return codigo


if __name__ == "__main__":
    exit(main())
