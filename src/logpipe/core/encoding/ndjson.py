"""JSON encoder for log records."""

import json
from typing import Any

from logpipe.core.encoding.logfmt import MALFORMED_VALUE
from logpipe.core.encoding.values import (
    dump_value,
    error_text,
    format_json_value,
    safe_str,
)
from logpipe.core.models import Alone, CallerTag, Record, Spew

ERROR_KEY = "error"


class JsonFormat:
    """Encodes records as JSON objects.

    The default settings produce newline-delimited JSON, one compact object
    per line.

    Args:
        pretty: Indent the output.
        line_separated: Terminate each record with a newline.
    """

    def __init__(self, pretty: bool = False, line_separated: bool = True) -> None:
        self.pretty = pretty
        self.line_separated = line_separated

    def _dumps(self, obj: dict[str, Any]) -> str:
        return json.dumps(
            obj,
            indent=4 if self.pretty else None,
            ensure_ascii=False,
            allow_nan=False,
        )

    def format(self, record: Record) -> bytes:
        """Encode a record.

        If the mapping cannot be serialized the result is an object holding
        only the failure under the ``error`` key.
        """
        props = self.to_dict(record)
        try:
            text = self._dumps(props)
        except (TypeError, ValueError) as e:
            text = self._dumps({ERROR_KEY: str(e)})
        if self.line_separated:
            text += "\n"
        return text.encode("utf-8", "backslashreplace")

    @staticmethod
    def to_dict(record: Record) -> dict[str, Any]:
        """Build the key/value mapping for ``record``.

        Built-in fields come first, then the attributes in order. A
        non-string key is reported under ``error`` and its value dropped.
        """
        names = record.key_names
        props: dict[str, Any] = {
            names.time: record.time.isoformat(),
            names.level: str(record.level),
            names.message: record.message,
        }
        errors: list[str] = []
        attributes = record.attributes
        count = len(attributes)
        i = 0
        while i < count:
            item = attributes[i]
            i += 1
            if isinstance(item, BaseException):
                errors.append(error_text(item))
                continue
            if isinstance(item, Spew):
                props[item.title or "spew"] = dump_value(item.obj)
                continue
            if isinstance(item, Alone):
                props[item.title] = format_json_value(item.obj)
                continue
            if isinstance(item, CallerTag):
                props["caller"] = str(item)
                continue
            if item is None:
                continue
            if i >= count:
                value: Any = MALFORMED_VALUE
            else:
                value = format_json_value(attributes[i])
            i += 1
            if isinstance(item, str):
                props[str(item)] = value
            else:
                props[ERROR_KEY] = f"{safe_str(item)} is not a string key"
        if errors:
            props["errors"] = errors
        return props
