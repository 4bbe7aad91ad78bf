"""Demo command: parse sample orders on one thread and print them on another."""

import argparse
import sys
import threading
import time
from typing import List, Optional, Sequence

from .messages import EnterOrderRequest
from .protocol import ParseError, Parser, RequestKind
from .spsc import QueueEmpty, SPSCQueue


def _order(ref, side, quantity, symbol, price, tif, display, capacity, ise, cross):
    return EnterOrderRequest(
        message_type="O",
        user_ref_num=ref,
        side=side,
        quantity=quantity,
        symbol=symbol.ljust(8).encode("ascii"),
        price=price,
        time_in_force=tif,
        display=display,
        capacity=capacity,
        inter_market_sweep_eligibility=ise,
        cross_type=cross,
        cl_ord_id=f"ID_{ref}".ljust(14).encode("ascii"),
        appendage_length=0,
    ).to_bytes()


def sample_messages() -> List[bytes]:
    """Return the wire bytes of the sample enter-order requests."""
    return [
        _order(1, "B", 100, "GOOG", 0, "0", "Y", "A", "Y", "N"),
        _order(2, "E", 500, "MSFT", 0, "3", "N", "P", "N", "N"),
        _order(3, "S", 1000, "AMZN", 0, "0", "A", "R", "N", "C"),
        _order(
            4,
            "B",
            50,
            "BABA",
            int.from_bytes(b"\x00\x00\x00\x00\x00\x01\x12\x15", "little"),
            "E",
            "Y",
            "O",
            "N",
            "N",
        ),
    ]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the producer and consumer threads over the sample messages."""
    arg_parser = argparse.ArgumentParser(
        prog="hft-trading",
        description="Parse sample order entry messages through a SPSC queue.",
    )
    arg_parser.parse_args(argv)

    queue: SPSCQueue = SPSCQueue()
    tx, rx = queue.split()
    ingest = Parser(tx)
    messages = sample_messages()
    producer_done = threading.Event()

    def produce() -> None:
        try:
            for message in messages:
                try:
                    ingest.parse(message)
                except ParseError as exc:
                    print(f"Error: {exc}", file=sys.stderr)
        finally:
            producer_done.set()

    def consume() -> None:
        while True:
            finished = producer_done.is_set()
            try:
                request = rx.recv()
            except QueueEmpty:
                if finished:
                    return
                time.sleep(0)
                continue
            print("[Receiver] Received")
            if request.kind is RequestKind.ENTER_ORDER:
                print(request.message)

    producer = threading.Thread(target=produce, name="producer")
    consumer = threading.Thread(target=consume, name="consumer")
    producer.start()
    consumer.start()
    producer.join()
    consumer.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())