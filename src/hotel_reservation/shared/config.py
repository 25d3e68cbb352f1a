import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()

SERVICE_NAME = os.getenv("POWERTOOLS_SERVICE_NAME", "hotel-reservation")

# 入出力で使う日付形式 (例: 02/01/2020)
DATE_FORMAT = os.getenv("DATE_FORMAT", "%m/%d/%Y")
