"""Controllers bridging the item store to the Flet views."""

from .editor_controller import EditorMode, ItemEditorController, SubmitOutcome
from .list_controller import ItemListController

__all__ = ["EditorMode", "ItemEditorController", "ItemListController", "SubmitOutcome"]
