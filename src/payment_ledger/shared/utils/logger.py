import os

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "payment-ledger"


def get_logger(service_name: str | None = None) -> Logger:
    """powertools の Logger を返す

    サービス名の指定がなければ POWERTOOLS_SERVICE_NAME を使う。
    ログレベルは POWERTOOLS_LOG_LEVEL に従う。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME)
    )
