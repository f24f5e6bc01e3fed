import asyncio
from subdispatch.host import CommandHost
from subdispatch.plugins import demo
from subdispatch.telnet_server import start_server
from subdispatch.utility.utils import load_config


def prepare():
    host = CommandHost()
    demo.enable(host)
    return host


if __name__ == '__main__':
    host = prepare()
    cfg = load_config()
    try:
        asyncio.run(start_server(host, cfg))
    except KeyboardInterrupt:
        print('Shutting down...')
