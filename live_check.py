import asyncio, sys
import trackcard.auth as auth
from trackcard.log import configure_logging
from trackcard.view import SearchViewController

async def main(query):
    env = auth.load_env()
    configure_logging(env["LOG_LEVEL"])
    view = SearchViewController(env["CLIENT_ID"], env["CLIENT_SECRET"])
    await view.activate()
    await view.submit(query)
    snap = view.snapshot()
    print(snap["message"])
    print(snap["title"], snap["image_url"])

if __name__ == "__main__":
    asyncio.run(main(" ".join(sys.argv[1:]) or "california"))
