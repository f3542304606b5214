from contextlib import asynccontextmanager
from typing import Optional

import httpx
import uvicorn
from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from agenda.api import ContactsApiClient
from agenda.config import Settings, get_settings
from agenda.controller import ContactBookController
from agenda.form import FORM_FIELDS, FormController, SubmitResult
from agenda.logging import get_logger, setup_logging
from agenda.views import FormView, PageView, render_form, render_page

logger = get_logger(__name__)


class FieldValue(BaseModel):
    value: str


class SubmitResponse(BaseModel):
    result: SubmitResult
    page: PageView


def create_app(
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        api = ContactsApiClient(settings.api_base_url, transport=transport)
        book = ContactBookController(api)
        app.state.book = book
        app.state.form = FormController(book.add_contact)
        logger.info("Loading contacts", extra={"api_base_url": api.base_url})
        await book.load()
        try:
            yield
        finally:
            await api.close()

    app = FastAPI(title=settings.app_title, lifespan=lifespan)

    def page(request: Request) -> PageView:
        book = request.app.state.book
        return render_page(settings, book.state, book.cards(), request.app.state.form)

    @app.get("/", response_model=PageView)
    def read_page(request: Request):
        return page(request)

    @app.put("/form/{field}", response_model=FormView)
    def update_field(field: str, body: FieldValue, request: Request):
        if field not in FORM_FIELDS:
            raise HTTPException(status_code=404, detail="Field not found")
        form = request.app.state.form
        form.set_field(field, body.value)
        return render_form(form)

    @app.post("/form/submit", response_model=SubmitResponse)
    async def submit_form(request: Request):
        result = await request.app.state.form.submit()
        return SubmitResponse(result=result, page=page(request))

    @app.delete("/contacts/{contact_id}", response_model=PageView)
    async def delete_contact(contact_id: str, request: Request):
        # Path ids are strings; delete through the card so the stored id type is kept.
        for card in request.app.state.book.cards():
            if str(card.id) == contact_id:
                await card.on_delete()
                break
        else:
            await request.app.state.book.delete_contact(contact_id)
        return page(request)

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    uvicorn.run(app, host="127.0.0.1", port=8000)


if __name__ == "__main__":
    run()
