from .item_form import build_item_form_view
from .item_list import build_item_list_view

__all__ = ["build_item_form_view", "build_item_list_view"]
