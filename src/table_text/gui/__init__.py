"""PySide6 host view and demo viewer."""
