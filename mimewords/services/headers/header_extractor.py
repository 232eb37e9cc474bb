"""Decoding of the header fields of stored email messages."""

import logging
from email import message_from_binary_file
from email.header import Header
from email.message import Message
from email.policy import compat32
from pathlib import Path
from typing import Optional

from mimewords.config.decoder_config import HeaderFieldsConfig
from mimewords.services.decoding.header_decoder import HeaderDecoder
from mimewords.utils.address_utils import decode_address_list
from .base import HeaderParseError

logger = logging.getLogger(__name__)


class HeaderExtractor:
    """Extract and decode configured header fields from email files."""

    def __init__(
        self,
        decoder: Optional[HeaderDecoder] = None,
        fields: Optional[HeaderFieldsConfig] = None,
    ):
        """
        Initialize extractor.

        Args:
            decoder: Header decoder (default: HeaderDecoder())
            fields: Text and address fields to decode
        """
        self.decoder = decoder or HeaderDecoder()
        self.fields = fields or HeaderFieldsConfig()

    def extract_from_file(self, file_path: Path) -> dict[str, list[str]]:
        """
        Decode header fields of an email file.

        Args:
            file_path: Path to a single RFC 5322 message

        Returns:
            Mapping of field name to decoded values, in configuration order;
            fields absent from the message are omitted

        Raises:
            FileNotFoundError: If file doesn't exist
            HeaderParseError: If the file cannot be read as a message
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Email file not found: {file_path}")

        try:
            # compat32 keeps encoded-words in header values untouched
            with open(file_path, "rb") as f:
                msg = message_from_binary_file(f, policy=compat32)
        except Exception as e:
            raise HeaderParseError(f"Error parsing email file {file_path}: {e}")

        logger.debug("Parsed %s", file_path)
        return self.extract_from_message(msg)

    def extract_from_message(self, message: Message) -> dict[str, list[str]]:
        """
        Decode header fields of a parsed message.

        Args:
            message: Message parsed with the compat32 policy

        Returns:
            Mapping of field name to decoded values
        """
        headers: dict[str, list[str]] = {}

        for name in self.fields.text_fields:
            values = self._raw_values(message, name)
            if values:
                headers[name] = [self.decoder.decode_text(v) for v in values]

        for name in self.fields.address_fields:
            values = self._raw_values(message, name)
            if values:
                headers[name] = [decode_address_list(v, self.decoder) for v in values]

        return headers

    @staticmethod
    def _raw_values(message: Message, name: str) -> list[str]:
        """Return the raw values of a header field as strings."""
        values = []
        for value in message.get_all(name, []):
            if isinstance(value, Header):
                # raw 8-bit header bytes come back wrapped in a Header object
                value = str(value)
            values.append(value)
        return values
