from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse, Response

import trackcard.auth as auth
from trackcard.constants import PLACEHOLDER_COVER, SEARCH_ICON
from trackcard.log import configure_logging
from trackcard.page import PLACEHOLDER_SVG, SEARCH_ICON_SVG, render_page
from trackcard.view import SearchViewController


def create_app(controller: SearchViewController) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await controller.activate()
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.controller = controller

    @app.get("/", response_class=HTMLResponse)
    def index():
        return render_page(controller.snapshot(), controller.query)

    @app.get("/search", response_class=HTMLResponse)
    async def search(q: str = ""):
        await controller.submit(q)
        return render_page(controller.snapshot(), controller.query)

    @app.get("/status")
    def status():
        return JSONResponse(controller.snapshot())

    @app.get(PLACEHOLDER_COVER)
    def placeholder_cover():
        return Response(PLACEHOLDER_SVG, media_type="image/svg+xml")

    @app.get(SEARCH_ICON)
    def search_icon():
        return Response(SEARCH_ICON_SVG, media_type="image/svg+xml")

    return app


def main():
    env = auth.load_env()
    configure_logging(env["LOG_LEVEL"])
    controller = SearchViewController(env["CLIENT_ID"], env["CLIENT_SECRET"])
    uvicorn.run(create_app(controller), host=env["HOST"], port=env["PORT"])


if __name__ == "__main__":
    main()
