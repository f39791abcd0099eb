# yewchat

A small chat client that talks to a chat server over a WebSocket.

After you pick a username, the client registers with the server, keeps the
list of users who are online (each with an avatar URL) and the messages as
they arrive, and sends what you type.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
yewchat [--username NAME] [--url URL]
```

- `--username NAME`: the name to chat under. If it is left out, you are
  asked for it. Surrounding spaces are removed and the name must not be
  empty.
- `--url URL`: the chat server address, `ws://127.0.0.1:8080` by default.

Once connected, every non-empty line you type is sent as a message. The
client prints `Users: a, b, c` whenever the list of online users changes
and `sender: text` for each message received. When standard input ends
the connection is closed.

Exit status is 0 after a normal close, 1 if the connection fails, the
server sends a malformed frame, or no username could be read, and 130 on
Ctrl-C.

## Wire format

Every frame is a JSON object with these fields:

- `messageType`: one of `"users"`, `"register"` or `"message"`
- `data`: a string, or `null`
- `dataArray`: a list of strings, or `null`

The client sends `register` with its username in `data` once it starts,
and `message` with the text in `data` for each message. The server sends
`users` with the names of everyone online in `dataArray`, and `message`
with `data` holding a JSON object `{"from": ..., "message": ...}`.
Binary frames are accepted if they are valid UTF-8 and dropped otherwise.

## Using it as a library

- `yewchat.protocol`: `MsgType`, `WebSocketMessage`, `MessageData`
  (`sender`, `message`), `UserProfile` (with `UserProfile.from_name`), and
  the functions `encode_message`, `decode_message`, `decode_message_data`
  and `avatar_url`. The decoders raise `ValueError` on malformed input.
- `yewchat.event_bus`: `EventBus`, which hands every message passed to
  `send` to all callbacks registered with `connect`; `connect` returns an
  id for `disconnect`.
- `yewchat.websocket`: `WebsocketService`, which queues outgoing text with
  `try_send` (at most 1000 queued; `asyncio.QueueFull` beyond that,
  `RuntimeError` after `close`), passes incoming frames to the event bus
  through `dispatch_incoming`, and exchanges messages in `run` until the
  connection ends or `close` is called.
- `yewchat.chat`: `Chat`, which registers the user on creation, applies
  incoming frames with `handle_message`, sends with `submit_message`,
  stops listening with `close`, and returns the chat screen as an HTML
  string with `render`. In that HTML, messages ending in `.gif` are shown
  as images; `render` raises `LookupError` for a message from a user who
  is not in the user list.
- `yewchat.app`: `Route`, `route_for_path`, `User`, `Login` and `main`.

```python
from yewchat.protocol import MsgType, WebSocketMessage, encode_message, decode_message

frame = encode_message(WebSocketMessage(MsgType.REGISTER, data="alice"))
assert decode_message(frame).data == "alice"
```

## What it does not do

- There is no chat server here; the client needs one that speaks the wire
  format above.
- There is no graphical or browser interface. `Chat.render` produces HTML
  text, but nothing serves or displays it; the `yewchat` command is a plain
  terminal client.