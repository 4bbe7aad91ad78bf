"""Order-entry message decoding, an SPSC queue and an order-queue linked list."""

__version__ = "0.1.0"
__all__ = ["cli", "linked_list", "messages", "protocol", "spsc"]