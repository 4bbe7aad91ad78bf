# hft_trading

Building blocks for an order-entry pipeline.

## Modules

### `hft_trading.messages`

This module holds frozen dataclasses for fixed-layout, little-endian,
packed order-entry messages:

| Class | Type byte | Wire size |
|---|---|---|
| `EnterOrderRequest` | `O` | 47 bytes |
| `ReplaceOrderRequest` | `U` | 40 bytes |
| `CancelOrderRequest` | `X` | 11 bytes |
| `ModifyOrderRequest` | `M` | 12 bytes |
| `MassCancelRequest` | `C` | 19 bytes |
| `DisableOrderEntryRequest` | `D` | 11 bytes |
| `EnableOrderEntryRequest` | `E` | 11 bytes |
| `AccountQueryRequest` | `Q` | 3 bytes |

The fields use these Python types:

- Single-byte alpha fields (side, display, and so on) are one-character `str`.
- Fixed-width alpha fields (`symbol`, `cl_ord_id`, `firm`) are `bytes`.
- Numbers, including the raw integer `price`, are `int`.

Each class has two methods:

- `from_bytes(data)` decodes from the start of `data` and ignores any trailing
  bytes. It raises `ValueError` if `data` is too short.
- `to_bytes()` encodes the message. It raises `ValueError` when a field does
  not fit its wire width.

`format_alpha(raw)` returns the text of an alpha field, cut at the first space
or NUL byte. `str()` of an `EnterOrderRequest` gives a readable one-line
summary that uses `format_alpha` for the symbol and the client order id.

### `hft_trading.spsc`

`SPSCQueue(capacity=16384)` is a bounded ring buffer for one producer thread
and one consumer thread. It has `capacity` slots, and one slot always stays
free, so at most `capacity - 1` items fit. `capacity` must be at least 2.

- `try_push(item)` raises `QueueFull` when the queue is full.
- `try_pop()` raises `QueueEmpty` when nothing is waiting.
- `len(queue)` gives the number of queued items.
- `split()` returns a `Sender` and a `Receiver` that share the queue.
  `Sender.send` and `Receiver.recv` behave like `try_push` and `try_pop`.

`QueueFull` and `QueueEmpty` subclass `queue.Full` and `queue.Empty`.

### `hft_trading.linked_list`

`LinkedList` is a doubly linked list of `Node(user_ref_num, quantity)` objects.
It is meant to hold the orders resting at one price level.

- `push_back(node)` appends a node. It raises `ValueError` if the node is
  already in a list.
- `remove_node(node)` unlinks a node in constant time. It ignores `None` and
  raises `ValueError` for a node that belongs to another list.
- `len()` and iteration in insertion order are supported.
- `first_node` and `last_node` give the two ends of the list.

### `hft_trading.protocol`

`decode_request(data)` reads the first byte of `data`, picks the matching
message class and returns a `ProtocolRequest(kind, message)`. `kind` is a
`RequestKind` member. Empty input, an unknown type byte or a message that is
too short raises `ParseError`, which is a `ValueError`.

`Parser(sender).parse(data)` decodes `data` and sends the request through a
`Sender`. It returns `False` if the queue was full and the request was
dropped, and `True` otherwise.

## Installation

```
pip install .
```

To also install pytest, use the `test` extra: `pip install .[test]`.

## Example

```python
from hft_trading.spsc import SPSCQueue
from hft_trading.protocol import Parser
from hft_trading.cli import sample_messages

sender, receiver = SPSCQueue(16384).split()
parser = Parser(sender)
for raw in sample_messages():
    parser.parse(raw)

request = receiver.recv()
print(request.kind, request.message)
```

`sample_messages()` returns the wire bytes of four sample enter-order
requests.

## Command line

```
hft-trading
```

This command starts a producer thread and a consumer thread:

- The producer parses the sample enter-order messages into an `SPSCQueue`.
  Parse errors go to standard error.
- The consumer prints `[Receiver] Received` for each request it takes off the
  queue, followed by the order for enter-order requests.

The command exits once the producer has finished and the queue is drained.

## What it does not do

- No order matching or order book is included. `LinkedList` is only the queue
  of orders at a single price level.
- It does not connect to any network session or exchange. Messages come in as
  bytes that you supply.
- The optional appendage after an `EnterOrderRequest` is not decoded. Only
  `appendage_length` is read.