import logging
import sys
from datetime import datetime, timezone
from typing import IO, Optional
from pythonjsonlogger import jsonlogger

# Marks handlers installed by get_logger so repeated calls do not stack them
_BRIDGE_HANDLER_ATTR = "_is_log_bridge_handler"

# Document fields owned by the formatter; properties with these names are prefixed
RESERVED_FIELDS = frozenset({'timestamp', 'level', 'name', 'message', 'message_template',
                             'event_timestamp', 'exc_info', 'stack_info'})
PROPERTY_PREFIX = 'properties.'

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class BridgeJSONFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(BridgeJSONFormatter, self).add_fields(log_record, record, message_dict)

        # Properties travel as one extra attribute; flatten them into the document.
        # A property clashing with a document field keeps its value under a prefix.
        properties = log_record.pop('properties', None) or {}
        for key, value in properties.items():
            if key in RESERVED_FIELDS or key in log_record:
                key = PROPERTY_PREFIX + key
            log_record[key] = value

        event_timestamp = getattr(record, 'event_timestamp', None)
        if isinstance(event_timestamp, datetime):
            log_record['timestamp'] = event_timestamp.isoformat()
        elif not log_record.get('timestamp'):
            log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record.pop('event_timestamp', None)

        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname


def create_handler(stream: Optional[IO] = None, json_output: bool = True) -> logging.Handler:
    handler = logging.StreamHandler(stream or sys.stderr)
    if json_output:
        handler.setFormatter(BridgeJSONFormatter('%(timestamp)s %(level)s %(name)s %(message)s'))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    setattr(handler, _BRIDGE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str,
               level: int = logging.DEBUG,
               stream: Optional[IO] = None,
               json_output: bool = True) -> logging.Logger:
    """
    Return the named stdlib logger with exactly one bridge handler attached.

    Calling again for the same name replaces the previous bridge handler,
    so the stream and output format follow the latest call.
    """
    logger = logging.getLogger(name)
    for existing in list(logger.handlers):
        if getattr(existing, _BRIDGE_HANDLER_ATTR, False):
            logger.removeHandler(existing)
    logger.addHandler(create_handler(stream, json_output))
    logger.setLevel(level)
    # Prevent duplicate logs if propagation is on
    logger.propagate = False
    return logger
