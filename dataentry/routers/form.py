"""Routes for the single data entry page (Save, View Data, Clear)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from dataentry.services.entry_controller import ActionResult, EntryController

router = APIRouter(tags=["form"])


@dataclass
class PageState:
    """What the page shows between requests: listing text and a pending notice."""

    display: str = ""
    notice: Optional[ActionResult] = None

    def apply(self, result: ActionResult) -> None:
        if result.display is not None:
            self.display = result.display
        if result.notify:
            self.notice = result


def _get_controller(request: Request) -> EntryController:
    controller = getattr(getattr(request.app, "state", None), "controller", None)
    if not controller:
        raise RuntimeError("EntryController not configured")
    return controller


def _get_page(request: Request) -> PageState:
    page = getattr(getattr(request.app, "state", None), "page", None)
    if page is None:
        raise RuntimeError("PageState not configured")
    return page


def _get_templates(request: Request) -> Jinja2Templates:
    tpl = getattr(getattr(request.app, "state", None), "templates", None)
    if tpl:
        return tpl
    raise RuntimeError("Templates not configured")


def _back_to_form() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


@router.get("/", response_class=HTMLResponse)
def form_page(request: Request):
    controller = _get_controller(request)
    page = _get_page(request)
    notice, page.notice = page.notice, None
    templates = _get_templates(request)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "request": request,
            "title": request.app.title,
            "name": controller.form.read_name(),
            "age": controller.form.read_age(),
            "display": page.display,
            "notice": notice,
        },
    )


@router.post("/save")
def save(request: Request, name: str = Form(""), age: str = Form("")):
    controller = _get_controller(request)
    _get_page(request).apply(controller.save(name=name, age=age))
    return _back_to_form()


@router.post("/view")
def view(request: Request, name: str = Form(""), age: str = Form("")):
    controller = _get_controller(request)
    _get_page(request).apply(controller.view(name=name, age=age))
    return _back_to_form()


@router.post("/clear")
def clear(request: Request):
    controller = _get_controller(request)
    _get_page(request).apply(controller.clear())
    return _back_to_form()
