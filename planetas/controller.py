"""
Planet Controller

Sequences form validation, storage calls and list refreshes for the
list screen and the add/edit modal.
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from planetas.exceptions import StorageError, ValidationError
from planetas.forms import PlanetForm
from planetas.schemas.planet import PlanetResponse, PlanetUpdate
from planetas.services.planet_service import PlanetService

logger = logging.getLogger(__name__)

# action -> (success message, failure message)
MESSAGES = {
    "add": ("Planeta adicionado com sucesso!", "Falha ao adicionar planeta."),
    "edit": ("Planeta atualizado com sucesso!", "Falha ao atualizar planeta."),
    "delete": ("Planeta excluído com sucesso!", "Falha ao excluir planeta."),
}

LOAD_FAILED_MESSAGE = "Falha ao carregar planetas."


@dataclass(frozen=True)
class Notification:
    """Transient message shown after an action"""
    success: bool
    message: str
    field: Optional[str] = None

    @classmethod
    def for_action(cls, action: str, success: bool) -> "Notification":
        ok_message, fail_message = MESSAGES[action]
        return cls(success=success, message=ok_message if success else fail_message)


class PlanetController:
    """
    Controller for the planet list and form.

    Storage failures and zero-row results are reported the same way:
    a generic failure notification.
    """

    def __init__(self, service: PlanetService):
        self.service = service
        self.planets: List[PlanetResponse] = []
        self.load_failed = False

    def load(self) -> List[PlanetResponse]:
        """Initial fetch when the list screen is entered"""
        return self.refresh()

    def refresh(self) -> List[PlanetResponse]:
        """
        Replace the in-memory list with a fresh fetch.

        If the fetch fails the previous list is kept and load_failed is set.
        """
        try:
            planets = self.service.fetch_all()
        except StorageError:
            logger.warning("Planet fetch failed, keeping %d record(s)", len(self.planets))
            self.load_failed = True
        else:
            self.planets = planets
            self.load_failed = False
        return self.planets

    def find(self, planet_id: int) -> Optional[PlanetResponse]:
        return next((p for p in self.planets if p.id == planet_id), None)

    def submit(self, form: PlanetForm, planet_id: Optional[int] = None) -> Notification:
        """
        Validate the form and save it.

        Inserts when planet_id is None, otherwise overwrites that record.
        The list is refreshed only on success.
        """
        action = "add" if planet_id is None else "edit"

        try:
            planet = form.validate()
        except ValidationError as e:
            logger.debug("Rejected planet form: %s", e)
            return Notification(success=False, message=e.message, field=e.field)

        try:
            if planet_id is None:
                success = self.service.insert(planet) > 0
            else:
                updated = PlanetUpdate(id=planet_id, **planet.model_dump())
                success = self.service.update(updated) > 0
        except StorageError:
            success = False

        notification = self._notify(action, success)
        if success:
            self.refresh()
        return notification

    def remove(self, planet_id: int) -> Notification:
        """Delete a record, then refresh the list regardless of the outcome"""
        try:
            success = self.service.delete(planet_id) > 0
        except StorageError:
            success = False

        notification = self._notify("delete", success)
        self.refresh()
        return notification

    def _notify(self, action: str, success: bool) -> Notification:
        if not success:
            logger.warning("Planet %s failed", action)
        return Notification.for_action(action, success)
