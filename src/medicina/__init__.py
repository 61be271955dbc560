"""Medicina Digital - clinic records and medical document generation."""

__version__ = "0.1.0"

# Lazy imports to avoid loading reportlab/httpx when only using the store
def __getattr__(name: str):
    if name in ("EntityStore", "get_entity_store"):
        from . import store
        return getattr(store, name)
    elif name in ("RecordEditor", "EditorConfig"):
        from . import editor
        return getattr(editor, name)
    elif name == "TextAssist":
        from .assist import TextAssist
        return TextAssist
    elif name == "RemoteTextModel":
        from .remote import RemoteTextModel
        return RemoteTextModel
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    "EntityStore",
    "get_entity_store",
    "RecordEditor",
    "EditorConfig",
    "TextAssist",
    "RemoteTextModel",
]
