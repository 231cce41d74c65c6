"""Copy text to the system clipboard."""
import pyperclip


def copy(text: str) -> None:
    # Raises pyperclip.PyperclipException when no clipboard backend is usable.
    pyperclip.copy(text)
