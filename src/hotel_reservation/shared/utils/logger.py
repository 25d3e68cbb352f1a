import sys

from aws_lambda_powertools import Logger

from hotel_reservation.shared.config import LOG_LEVEL, SERVICE_NAME


def get_logger(service_name: str = SERVICE_NAME) -> Logger:
    """構造化ロガーを取得する

    メニュー出力 (stdout) と混ざらないよう stderr に出力する。
    """
    return Logger(service=service_name, level=LOG_LEVEL, stream=sys.stderr)
