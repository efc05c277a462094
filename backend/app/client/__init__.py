from .api import PortfolioAPI, APIError
from .cache import QueryCache
from .notify import NotificationKind, Notification, LogNotifier, InMemoryNotifier
from .assigner import CategoryAssigner, CATEGORY_PRODUCT_IDS
from .editor import ProductEditor, ProductForm, EditorState
from .grid import Project, DisplayItem, ContentRow, build_display_items, build_content_row, category_labels

__all__ = [
    "PortfolioAPI", "APIError",
    "QueryCache",
    "NotificationKind", "Notification", "LogNotifier", "InMemoryNotifier",
    "CategoryAssigner", "CATEGORY_PRODUCT_IDS",
    "ProductEditor", "ProductForm", "EditorState",
    "Project", "DisplayItem", "ContentRow", "build_display_items", "build_content_row", "category_labels",
]
