"""
Clientes dos padrões estruturais
"""
from patterns import aplicar_adicionais
from patterns.adapter import AdaptadorSmsXyz, NotificacaoEmail, ServicoSmsXyz, notificar_usuarios
from patterns.composite import Orgao, montar_organizacao
from patterns.decorator import ComponenteQuarto, QuartoSimples, WiFi, CafeDaManha
from patterns.proxy import Downloader, DownloaderProxy
from patterns.facade import SmsFacade


def demo_adapter():
    """Demonstração do padrão Adapter"""
    notificador_sms = AdaptadorSmsXyz(ServicoSmsXyz())
    notificar_usuarios(notificador_sms)

    notificador_email = NotificacaoEmail()
    notificar_usuarios(notificador_email)


def demo_composite():
    """Demonstração do padrão Composite"""
    def cliente(organizacao: Orgao):
        print(organizacao.get_informacao())
        print(f"[Composite] Receita total: {organizacao.get_receita()}")

    cliente(montar_organizacao())


def demo_decorator():
    """Demonstração do padrão Decorator"""
    def cliente(quarto: ComponenteQuarto):
        print(quarto.get_descricao())
        print(f"{quarto.get_preco():.2f}")

    quarto = QuartoSimples()
    quarto = WiFi(quarto)
    quarto = CafeDaManha(quarto)
    cliente(quarto)

    cliente(aplicar_adicionais(QuartoSimples(), ["Wi-Fi", ("Vista para o mar", 5.0)]))


def demo_proxy():
    """Demonstração do padrão Proxy"""
    def cliente(downloader: Downloader):
        for _ in range(5):
            downloader.baixar("http://caminho-do-arquivo.jpg")

    cliente(DownloaderProxy())


def demo_facade():
    """Demonstração do padrão Facade"""
    SmsFacade.enviar("Bem-vindo!", "+5511999990000")
    SmsFacade.enviar("Seu código 2FA", "+0011234567")
