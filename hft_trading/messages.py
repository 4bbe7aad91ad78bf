"""Fixed-layout order entry messages and their little-endian wire form."""

import struct
from dataclasses import dataclass, fields
from typing import Any, ClassVar


def format_alpha(raw: bytes) -> str:
    """Return the text of an alpha field, cut at the first space or NUL byte."""
    end = next((pos for pos, byte in enumerate(raw) if byte in (0x20, 0x00)), len(raw))
    return bytes(raw[:end]).decode("utf-8", errors="replace")


def _decode(cls: Any, data) -> Any:
    """Decode an instance of ``cls`` from the start of ``data``.

    Fields annotated ``str`` hold a single byte as a one-character string,
    ``bytes`` fields hold fixed-width alpha arrays and ``int`` fields hold
    little-endian unsigned integers. Trailing bytes are ignored.
    """
    layout: struct.Struct = cls._STRUCT
    head = bytes(data[: layout.size])
    if len(head) < layout.size:
        raise ValueError(f"{cls.__name__} needs {layout.size} bytes, got {len(head)}")
    values = [
        value.decode("latin-1") if field.type is str else value
        for field, value in zip(fields(cls), layout.unpack(head))
    ]
    return cls(*values)


def _encode(message: Any) -> bytes:
    """Encode ``message`` into its wire layout."""
    layout: struct.Struct = message._STRUCT
    name = type(message).__name__
    raw = tuple(
        getattr(message, field.name).encode("latin-1")
        if field.type is str
        else getattr(message, field.name)
        for field in fields(message)
    )
    try:
        packed = layout.pack(*raw)
    except struct.error as exc:
        raise ValueError(f"cannot encode {name}: {exc}") from exc
    if layout.unpack(packed) != raw:
        raise ValueError(f"cannot encode {name}: a field does not match its wire width")
    return packed


@dataclass(frozen=True)
class EnterOrderRequest:
    """Enter a new order (type 'O'); the optional appendage is not decoded."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cIcI8sQccccc14sH")

    message_type: str
    user_ref_num: int
    side: str
    quantity: int
    symbol: bytes
    price: int
    time_in_force: str
    display: str
    capacity: str
    inter_market_sweep_eligibility: str
    cross_type: str
    cl_ord_id: bytes
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "EnterOrderRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)

    def __str__(self) -> str:
        return (
            "EnterOrderRequest { "
            f"type: '{self.message_type}', "
            f"user_ref_num: {self.user_ref_num}, "
            f"side: '{self.side}', "
            f"quantity: {self.quantity}, "
            f'symbol: "{format_alpha(self.symbol)}", '
            f"price: {self.price}, "
            f"time_in_force: '{self.time_in_force}', "
            f"display: '{self.display}', "
            f"capacity: '{self.capacity}', "
            f"ime_eligibility: '{self.inter_market_sweep_eligibility}', "
            f"cross_type: '{self.cross_type}', "
            f'cl_ord_id: "{format_alpha(self.cl_ord_id)}", '
            f"appendage_length: {self.appendage_length}"
            " }"
        )


@dataclass(frozen=True)
class ReplaceOrderRequest:
    """Replace an existing order (type 'U')."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cIIIQccc14sH")

    message_type: str
    orig_user_ref_num: int
    new_user_ref_num: int
    quantity: int
    price: int
    time_in_force: str
    display: str
    inter_market_sweep_eligibility: str
    cl_ord_id: bytes
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "ReplaceOrderRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)


@dataclass(frozen=True)
class CancelOrderRequest:
    """Cancel or reduce an order (type 'X'); quantity 0 cancels fully."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cIIH")

    message_type: str
    user_ref_num: int
    quantity: int
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "CancelOrderRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)


@dataclass(frozen=True)
class ModifyOrderRequest:
    """Change the side or size of an order (type 'M')."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cIcIH")

    message_type: str
    user_ref_num: int
    side: str
    quantity: int
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "ModifyOrderRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)


@dataclass(frozen=True)
class MassCancelRequest:
    """Cancel all orders of a firm, optionally for one symbol (type 'C')."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cI4s8sH")

    message_type: str
    user_ref_num: int
    firm: bytes
    symbol: bytes
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "MassCancelRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)


@dataclass(frozen=True)
class DisableOrderEntryRequest:
    """Disable order entry for a firm (type 'D')."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cI4sH")

    message_type: str
    user_ref_num: int
    firm: bytes
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "DisableOrderEntryRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)


@dataclass(frozen=True)
class EnableOrderEntryRequest:
    """Enable order entry for a firm (type 'E')."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cI4sH")

    message_type: str
    user_ref_num: int
    firm: bytes
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "EnableOrderEntryRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)


@dataclass(frozen=True)
class AccountQueryRequest:
    """Query account state (type 'Q')."""

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<cH")

    message_type: str
    appendage_length: int

    @classmethod
    def from_bytes(cls, data) -> "AccountQueryRequest":
        """Decode from the start of ``data``; trailing bytes are ignored."""
        return _decode(cls, data)

    def to_bytes(self) -> bytes:
        """Encode into the wire layout."""
        return _encode(self)