"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from meal_topup.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_report(
    request_id: str,
    payday: date,
    weekdays_until_payday: int,
    topup_needed: Decimal,
    duration_ms: float,
) -> None:
    """Log structured report outcome for analysis"""
    logging.info(
        "Report completed",
        extra={
            "request_id": request_id,
            "step": "report_complete",
            "payday": payday.isoformat(),
            "weekdays_until_payday": weekdays_until_payday,
            "topup_needed": str(topup_needed),
            "duration_ms": duration_ms,
        },
    )
