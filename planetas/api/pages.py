"""
Planet Pages Router

Server-rendered list screen and add/edit modal.
"""
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from planetas.config import settings
from planetas.controller import LOAD_FAILED_MESSAGE, MESSAGES, Notification, PlanetController
from planetas.database import get_db
from planetas.forms import PlanetForm
from planetas.services.planet_service import PlanetService

router = APIRouter(tags=["pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))


def get_controller(db: Session = Depends(get_db)) -> PlanetController:
    """Dependency for a controller bound to the request session"""
    return PlanetController(PlanetService(db))


def _render(
    request: Request,
    controller: PlanetController,
    notification: Optional[Notification] = None,
    dialog: Optional[dict] = None,
    status_code: int = 200,
):
    if notification is None and controller.load_failed:
        notification = Notification(success=False, message=LOAD_FAILED_MESSAGE)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.app_name,
            "planets": controller.planets,
            "load_failed": controller.load_failed,
            "notification": notification,
            "dialog": dialog,
        },
        status_code=status_code,
    )


def render_unavailable(request: Request):
    """List screen shown when the database cannot be opened at all"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "app_name": settings.app_name,
            "planets": [],
            "load_failed": True,
            "notification": Notification(success=False, message=LOAD_FAILED_MESSAGE),
            "dialog": None,
        },
        status_code=503,
    )


def _dialog(form: PlanetForm, planet_id: Optional[int] = None, error: Optional[str] = None) -> dict:
    return {"form": form, "planet_id": planet_id, "editing": planet_id is not None, "error": error}


def _redirect(action: str, notification: Notification) -> RedirectResponse:
    ok = "1" if notification.success else "0"
    return RedirectResponse(url=f"/?action={action}&ok={ok}", status_code=303)


@router.get("/")
def planet_list(
    request: Request,
    action: Optional[str] = None,
    ok: Optional[bool] = None,
    controller: PlanetController = Depends(get_controller),
):
    """
    List screen.

    After a redirect, **action** and **ok** select the notification to show.
    """
    controller.load()
    notification = None
    if action in MESSAGES and ok is not None:
        notification = Notification.for_action(action, ok)
    return _render(request, controller, notification)


@router.get("/planets/new")
def new_planet(
    request: Request,
    controller: PlanetController = Depends(get_controller),
):
    """List screen with the blank add form open."""
    controller.load()
    return _render(request, controller, dialog=_dialog(PlanetForm()))


@router.get("/planets/{planet_id}/edit")
def edit_planet(
    planet_id: int,
    request: Request,
    controller: PlanetController = Depends(get_controller),
):
    """List screen with the edit form prefilled from the record."""
    controller.load()
    planet = controller.find(planet_id)
    if planet is None:
        return _render(request, controller, status_code=404)
    return _render(request, controller, dialog=_dialog(PlanetForm.from_planet(planet), planet_id))


def _submit(
    request: Request,
    controller: PlanetController,
    form: PlanetForm,
    planet_id: Optional[int] = None,
):
    notification = controller.submit(form, planet_id)
    if notification.success:
        return _redirect("add" if planet_id is None else "edit", notification)

    # Modal stays open with the user's input
    controller.load()
    status_code = 422 if notification.field else 200
    return _render(
        request,
        controller,
        notification=None if notification.field else notification,
        dialog=_dialog(form, planet_id, error=notification.message),
        status_code=status_code,
    )


@router.post("/planets")
def add_planet(
    request: Request,
    name: str = Form(""),
    distance: str = Form(""),
    size: str = Form(""),
    nickname: str = Form(""),
    controller: PlanetController = Depends(get_controller),
):
    """Submit the add form."""
    form = PlanetForm(name=name, distance=distance, size=size, nickname=nickname)
    return _submit(request, controller, form)


@router.post("/planets/{planet_id}")
def save_planet(
    planet_id: int,
    request: Request,
    name: str = Form(""),
    distance: str = Form(""),
    size: str = Form(""),
    nickname: str = Form(""),
    controller: PlanetController = Depends(get_controller),
):
    """Submit the edit form, keeping the original id."""
    form = PlanetForm(name=name, distance=distance, size=size, nickname=nickname)
    return _submit(request, controller, form, planet_id)


@router.post("/planets/{planet_id}/delete")
def delete_planet(
    planet_id: int,
    controller: PlanetController = Depends(get_controller),
):
    """Delete a planet and go back to the refreshed list."""
    # remove() refreshes the controller list; the redirected GET fetches again
    notification = controller.remove(planet_id)
    return _redirect("delete", notification)
