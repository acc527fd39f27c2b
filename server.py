# server.py
from mcp.server.fastmcp import FastMCP

import trackcard.auth as auth
from trackcard.log import configure_logging
from trackcard.resources import register_resources
from trackcard.tools import register_tools
from trackcard.view import SearchViewController


def build_server(controller: SearchViewController) -> FastMCP:
    mcp = FastMCP("trackcard")
    register_tools(mcp, controller)
    register_resources(mcp, controller)
    return mcp


def main():
    env = auth.load_env()
    configure_logging(env["LOG_LEVEL"])
    controller = SearchViewController(env["CLIENT_ID"], env["CLIENT_SECRET"])
    build_server(controller).run()


if __name__ == "__main__":
    main()
