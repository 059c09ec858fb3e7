import json
import logging
import sys
import time


class JsonFormatter(logging.Formatter):
    """JSON line formatter for structured logging"""

    # Extra attributes copied into the JSON line when a log call passes them
    EXTRA_FIELDS = ("path", "video_id", "status_code", "error_type", "count")

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line"""
        base = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for field in self.EXTRA_FIELDS:
            if hasattr(record, field):
                base[field] = getattr(record, field)

        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False, default=str)


def setup_json_logging(level: str = "INFO") -> None:
    """Setup JSON line logging for the application"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level.upper())

    logging.getLogger(__name__).info("JSON logging initialized")
