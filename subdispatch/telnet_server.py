import asyncio
import socket
import traceback

from subdispatch.models.senders import player_from_config
from subdispatch.utility.chat import to_ansi
from subdispatch.utility.logger import game_log
from subdispatch.utility.utils import load_config, validate_player_name

QUIT = "__QUIT__"


class ClientSession:
    def __init__(self, reader, writer, addr):
        self.reader = reader
        self.writer = writer
        self.addr = addr
        self.name = None
        self.player = None
        self.active = True
        # apply keepalive if socket available
        try:
            sock = writer.get_extra_info('socket')
            if sock is not None:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_KEEPALIVE, 1)
        except OSError:
            pass

    async def send(self, msg: str, end='\r\n'):
        if not self.active:
            return
        try:
            if not msg.endswith('\r\n'):
                out = msg + end
            else:
                out = msg
            self.writer.write(out.encode(errors='ignore'))
            await self.writer.drain()
        except (ConnectionResetError, BrokenPipeError):
            self.active = False
        except Exception as e:
            game_log("NET", f"Failed to send to {self.name}: {e}")
            self.active = False


class ClientTracker:
    """Connected sessions and per-IP connection counts for one server."""

    def __init__(self):
        self.clients = set()
        self.ip_counts = {}
        self.lock = asyncio.Lock()

    async def admit(self, session, ip, config):
        """
        Count the connection and apply the configured limits.

        Returns None when the session is admitted, otherwise the
        rejection message (and the connection is no longer counted).
        """
        async with self.lock:
            self.ip_counts[ip] = self.ip_counts.get(ip, 0) + 1
            if len(self.clients) >= config.get('max_total_connections', 100):
                reason = "Server busy. Try again later."
            elif self.ip_counts[ip] > config.get('max_connections_per_ip', 4):
                reason = "Too many connections from your IP."
            else:
                self.clients.add(session)
                return None
            self._uncount(ip)
            return reason

    async def release(self, session, ip):
        async with self.lock:
            if session in self.clients:
                self.clients.discard(session)
                self._uncount(ip)

    def _uncount(self, ip):
        cnt = self.ip_counts.get(ip, 1) - 1
        if cnt <= 0:
            self.ip_counts.pop(ip, None)
        else:
            self.ip_counts[ip] = cnt


def clean_input(raw: bytes) -> str:
    """Strip telnet control bytes and decode a login name."""
    # Keep printable bytes and basic whitespace
    cleaned = bytes(b for b in raw if 32 <= b <= 126 or b in (9, 10, 13))
    for bad in (b'\xff', b"'", b'"', b'\x00'):
        cleaned = cleaned.replace(bad, b'')
    return cleaned.decode(errors='ignore').strip()


def help_text(host) -> str:
    lines = ["Commands:"]
    for label in host.labels():
        lines.append(f"  /{label}")
    lines.append("  help")
    lines.append("  quit")
    return "\r\n".join(lines)


def process_line(host, player, line: str):
    """
    Handle one line of input for a logged-in player.

    Returns the text to send back (possibly empty), or QUIT.
    """
    cmd = line.strip()
    if not cmd:
        return ""
    if cmd.lower() in ("quit", "exit"):
        return QUIT
    if cmd.lower() in ("help", "?"):
        return help_text(host)

    try:
        host.handle_line(player, cmd)
    except Exception as e:
        traceback.print_exc()
        player.send_message(f"Error handling command: {e}")

    return "\r\n".join(to_ansi(m) for m in player.drain())


def make_client_handler(host, config, tracker=None):
    tracker = tracker if tracker is not None else ClientTracker()

    async def handle_client(reader, writer):
        peer = writer.get_extra_info('peername')
        addr = f"{peer[0]}:{peer[1]}" if peer else 'unknown'
        ip = peer[0] if peer else 'unknown'

        session = ClientSession(reader, writer, addr)
        rejected = await tracker.admit(session, ip, config)
        if rejected:
            writer.write(f"{rejected}\r\n".encode())
            await writer.drain()
            writer.close()
            game_log("NET", f"{addr} rejected: {rejected}")
            return

        game_log("NET", f"{addr} connected")

        try:
            writer.write(b"\r\nWelcome!\r\nEnter your name: ")
            await writer.drain()

            raw = await reader.readline()
            if not raw:
                return

            try:
                session.name = validate_player_name(clean_input(raw))
            except ValueError as e:
                writer.write(f"Invalid name: {e}\r\n".encode())
                await writer.drain()
                return

            session.player = player_from_config(session.name, config)
            await session.send(f"\r\nHello {session.name}! Type 'help' for commands.\r\n")

            while session.active:
                await session.send("> ", end="")  # same-line prompt
                data = await reader.readline()
                if not data:
                    break

                cmd = data.decode(errors='ignore').strip()
                resp = process_line(host, session.player, cmd)
                if resp == QUIT:
                    await session.send("Goodbye!\r\n")
                    break
                if resp:
                    await session.send(resp + "\r\n")

        except Exception as e:
            game_log("NET", f"Client {addr}: {e}")
            traceback.print_exc()

        finally:
            await tracker.release(session, ip)
            try:
                writer.close()
                await writer.wait_closed()
            except (ConnectionError, OSError):
                pass
            game_log("NET", f"{addr} closed connection")

    return handle_client


async def start_server(host, cfg=None):
    cfg = cfg if cfg is not None else load_config()
    bind = cfg.get('telnet_host', '0.0.0.0')
    port = cfg.get('telnet_port', 8023)
    server = await asyncio.start_server(make_client_handler(host, cfg), bind, port, limit=8192)
    game_log("NET", f"Telnet server running on {bind}:{port}")
    async with server:
        await server.serve_forever()
