"""JSON parser that keeps numbers with a fractional part as ``Decimal``.

DRF's stock ``JSONParser`` turns ``120000.10`` into a binary float before
any serializer sees it.  Money must never take that detour, so fractional
numbers are parsed straight from their JSON text into ``Decimal``.
"""

from __future__ import annotations

import codecs
from decimal import Decimal

from django.conf import settings
from rest_framework import renderers
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.utils import json


class DecimalJSONParser(JSONParser):
    """``JSONParser`` with ``parse_float=Decimal``.

    Trailing content after the document, ``NaN`` and ``Infinity`` are
    rejected with ``ParseError``.
    """

    media_type = "application/json"
    renderer_class = renderers.JSONRenderer

    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        encoding = parser_context.get("encoding", settings.DEFAULT_CHARSET)

        try:
            decoded_stream = codecs.getreader(encoding)(stream)
            parse_constant = json.strict_constant if self.strict else None
            return json.load(
                decoded_stream,
                parse_float=Decimal,
                parse_constant=parse_constant,
            )
        except ValueError as exc:
            raise ParseError("JSON parse error - %s" % str(exc))


class AnyMediaJSONParser(DecimalJSONParser):
    """``DecimalJSONParser`` that decodes the body whatever its Content-Type.

    Clients such as ``curl -d`` label JSON as form data or plain text; the
    body is still parsed as JSON and rejected with ``ParseError`` if it is not.
    """

    media_type = "*/*"
