"""
Configuração da aplicação via variáveis de ambiente
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Nível de log
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Chave da configuração -> (variável de ambiente, valor padrão)
VARIAVEIS_CONFIGURACAO = {
    "app_locale": ("APP_LOCALE", "en"),
    "db_host": ("DB_HOST", "127.0.0.1"),
    "db_port": ("DB_PORT", "3306"),
    "db_driver": ("DB_DRIVER", "mysql"),
    "sms.client_id": ("SMS_CLIENT_ID", "cliente-demo"),
    "sms.client_secret": ("SMS_CLIENT_SECRET", "segredo-demo"),
    "sms.driver": ("SMS_DRIVER", "xyz"),
}


def get_configuracoes_padrao() -> dict:
    """Lê os valores de configuração do ambiente, com os padrões como fallback"""
    return {
        chave: os.getenv(variavel, padrao)
        for chave, (variavel, padrao) in VARIAVEIS_CONFIGURACAO.items()
    }
