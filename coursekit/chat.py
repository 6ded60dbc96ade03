"""A broadcast chat over WebSockets: server and line-based client."""

from __future__ import annotations

import argparse
import asyncio
import sys
import threading
from collections import deque
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosedOK, WebSocketException

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 2000
DEFAULT_URI = f"ws://{DEFAULT_HOST}:{DEFAULT_PORT}"
WELCOME = "Welcome to chat! Type a message"


class _Subscription:
    """One receiver of a broadcaster's messages."""

    def __init__(self, broadcaster: Broadcaster) -> None:
        self._broadcaster = broadcaster
        self._messages: deque[str] = deque()
        self._available = asyncio.Event()
        self._lagged = 0

    def _push(self, message: str) -> None:
        if len(self._messages) >= self._broadcaster.capacity:
            self._messages.popleft()
            self._lagged += 1
        self._messages.append(message)
        self._available.set()

    async def recv(self) -> str:
        """Wait for the next message.

        Raises RuntimeError once if older messages had to be dropped.
        """
        while not self._messages:
            self._available.clear()
            await self._available.wait()
        if self._lagged:
            skipped, self._lagged = self._lagged, 0
            raise RuntimeError(f"receiver lagged behind by {skipped} messages")
        return self._messages.popleft()

    def close(self) -> None:
        """Stop receiving messages."""
        self._broadcaster._subscribers.discard(self)

    def __enter__(self) -> _Subscription:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class Broadcaster:
    """Fan each sent message out to every current subscriber."""

    def __init__(self, capacity: int = 16) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._subscribers: set[_Subscription] = set()

    def subscribe(self) -> _Subscription:
        """Return a new receiver of messages sent from now on."""
        subscription = _Subscription(self)
        self._subscribers.add(subscription)
        return subscription

    def send(self, message: str) -> int:
        """Deliver ``message`` to every subscriber and return how many there are."""
        if not self._subscribers:
            raise RuntimeError("no subscribers to receive the message")
        for subscription in self._subscribers:
            subscription._push(message)
        return len(self._subscribers)


def _text(message: Any) -> str:
    if not isinstance(message, str):
        raise ValueError("received a message that is not text")
    return message


async def handle_connection(websocket: Any, broadcaster: Broadcaster) -> None:
    """Relay a client's messages to everyone and everyone's messages to it."""
    addr = websocket.remote_address
    with broadcaster.subscribe() as subscription:
        await websocket.send(WELCOME)
        incoming = asyncio.ensure_future(websocket.recv())
        outgoing = asyncio.ensure_future(subscription.recv())
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, outgoing}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = _text(incoming.result())
                    except ConnectionClosedOK:
                        return
                    print(f"From client {addr!r} {message!r}")
                    broadcaster.send(message)
                    incoming = asyncio.ensure_future(websocket.recv())
                if outgoing in done:
                    await websocket.send(outgoing.result())
                    outgoing = asyncio.ensure_future(subscription.recv())
        finally:
            for task in (incoming, outgoing):
                task.cancel()
            await asyncio.gather(incoming, outgoing, return_exceptions=True)


async def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Run the chat server until cancelled."""
    broadcaster = Broadcaster()

    async def handler(websocket: Any) -> None:
        print(f"New connection from {websocket.remote_address!r}")
        await handle_connection(websocket, broadcaster)

    async with websockets.serve(handler, host, port):
        print(f"listening on port {port}")
        await asyncio.get_running_loop().create_future()


def _pump_stdin(loop: asyncio.AbstractEventLoop, lines: asyncio.Queue) -> None:
    stdin = sys.stdin
    try:
        for line in iter(stdin.readline, ""):
            loop.call_soon_threadsafe(lines.put_nowait, line.rstrip("\r\n"))
        loop.call_soon_threadsafe(lines.put_nowait, None)
    except RuntimeError:
        # The event loop has already gone away.
        return


async def run_client(uri: str = DEFAULT_URI) -> None:
    """Send standard input lines to the server and print what it sends back."""
    loop = asyncio.get_running_loop()
    lines: asyncio.Queue = asyncio.Queue()
    async with websockets.connect(uri) as websocket:
        threading.Thread(target=_pump_stdin, args=(loop, lines), daemon=True).start()
        incoming = asyncio.ensure_future(websocket.recv())
        typed = asyncio.ensure_future(lines.get())
        try:
            while True:
                done, _ = await asyncio.wait(
                    {incoming, typed}, return_when=asyncio.FIRST_COMPLETED
                )
                if incoming in done:
                    try:
                        message = _text(incoming.result())
                    except ConnectionClosedOK:
                        return
                    print(f"From server: {message}")
                    incoming = asyncio.ensure_future(websocket.recv())
                if typed in done:
                    line = typed.result()
                    if line is None:
                        return
                    await websocket.send(line)
                    typed = asyncio.ensure_future(lines.get())
        finally:
            for task in (incoming, typed):
                task.cancel()
            await asyncio.gather(incoming, typed, return_exceptions=True)


def server_main(argv: list[str] | None = None) -> int:
    """Start the chat server."""
    parser = argparse.ArgumentParser(description="Broadcast chat server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port))
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def client_main(argv: list[str] | None = None) -> int:
    """Start the chat client."""
    parser = argparse.ArgumentParser(description="Broadcast chat client.")
    parser.add_argument("--uri", default=DEFAULT_URI)
    args = parser.parse_args(argv)
    try:
        asyncio.run(run_client(args.uri))
    except KeyboardInterrupt:
        return 0
    except (OSError, WebSocketException, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(server_main())