"""Decoding of inbound order entry requests and their hand-off to a queue."""

import enum
from dataclasses import dataclass
from typing import Dict, Type, Union

from .messages import (
    AccountQueryRequest,
    CancelOrderRequest,
    DisableOrderEntryRequest,
    EnableOrderEntryRequest,
    EnterOrderRequest,
    MassCancelRequest,
    ModifyOrderRequest,
    ReplaceOrderRequest,
)
from .spsc import QueueFull, Sender

Message = Union[
    EnterOrderRequest,
    ReplaceOrderRequest,
    CancelOrderRequest,
    ModifyOrderRequest,
    MassCancelRequest,
    DisableOrderEntryRequest,
    EnableOrderEntryRequest,
    AccountQueryRequest,
]


class ParseError(ValueError):
    """Raised when a byte string is not a decodable request."""


class RequestKind(enum.Enum):
    """Request types, keyed by the message type byte."""

    ENTER_ORDER = "O"
    REPLACE_ORDER = "U"
    CANCEL_ORDER = "X"
    MODIFY_ORDER = "M"
    MASS_CANCEL = "C"
    DISABLE_ORDER_ENTRY = "D"
    ENABLE_ORDER_ENTRY = "E"
    ACCOUNT_QUERY = "Q"

    @property
    def message_class(self) -> Type[Message]:
        """The message layout used for this request type."""
        return _MESSAGE_CLASSES[self]


_MESSAGE_CLASSES: Dict[RequestKind, Type[Message]] = {
    RequestKind.ENTER_ORDER: EnterOrderRequest,
    RequestKind.REPLACE_ORDER: ReplaceOrderRequest,
    RequestKind.CANCEL_ORDER: CancelOrderRequest,
    RequestKind.MODIFY_ORDER: ModifyOrderRequest,
    RequestKind.MASS_CANCEL: MassCancelRequest,
    RequestKind.DISABLE_ORDER_ENTRY: DisableOrderEntryRequest,
    RequestKind.ENABLE_ORDER_ENTRY: EnableOrderEntryRequest,
    RequestKind.ACCOUNT_QUERY: AccountQueryRequest,
}


@dataclass(frozen=True)
class ProtocolRequest:
    """A decoded request together with its type."""

    kind: RequestKind
    message: Message


def decode_request(data) -> ProtocolRequest:
    """Decode one request from ``data``, dispatching on its first byte."""
    if not data:
        raise ParseError("Received empty byte slice")
    code = chr(data[0])
    try:
        kind = RequestKind(code)
    except ValueError:
        raise ParseError(f"Unknown request type: {code}") from None
    try:
        message = kind.message_class.from_bytes(data)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    return ProtocolRequest(kind, message)


class Parser:
    """Decodes raw requests and forwards them through a queue sender."""

    def __init__(self, sender: Sender) -> None:
        self._sender = sender

    def parse(self, data) -> bool:
        """Decode ``data`` and enqueue it.

        Returns False when the queue was full and the request was dropped.
        Raises ParseError when ``data`` is not a valid request.
        """
        request = decode_request(data)
        try:
            self._sender.send(request)
        except QueueFull:
            return False
        return True