"""
context_menu_command.py — Commands as parameters of GUI menu items.

A ContextMenu is configured with (label, command) pairs. The menu knows nothing
about the document operations behind each item; it only calls execute(). Items
can be added, removed and re-pointed at a different command at runtime, which is
the "parameterize objects with operations" use of the Command pattern.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

__all__ = [
    "MenuCommand",
    "DocumentEditor",
    "NewDocumentCommand",
    "OpenDocumentCommand",
    "SaveDocumentCommand",
    "CopyTextCommand",
    "PasteTextCommand",
    "MenuItem",
    "ContextMenu",
    "parameterized_command_demo",
]


# ---------- Command interface ----------

class MenuCommand(ABC):
    """
    Action bound to a menu item.

    :param description: Short label shown next to the item.
    """

    def __init__(self, description: str) -> None:
        self._description = description

    @property
    def description(self) -> str:
        """
        :return: Command description string.
        """
        return self._description

    @abstractmethod
    def execute(self) -> None:
        """
        Runs the operation against the receiver.
        """


# ---------- Receiver ----------

class DocumentEditor:
    """
    Receiver with the concrete document operations.
    """

    EMPTY_PLACEHOLDER = "(empty document)"

    def __init__(self) -> None:
        self.content = ""
        self._clipboard = ""

    def new_document(self) -> None:
        self.content = ""
        logger.info("New document")

    def open_document(self, filename: str) -> None:
        self.content = f"Opened file: {filename}"
        logger.info("Opened document: %s", filename)

    def save_document(self) -> None:
        logger.info("Saved document")

    def copy_text(self) -> None:
        self._clipboard = self.content
        logger.info("Copied text")

    def paste_text(self) -> None:
        self.content += self._clipboard
        logger.info("Pasted text")

    def show_content(self) -> str:
        """
        :return: Current content, or a placeholder for an empty document.
        """
        shown = self.content or self.EMPTY_PLACEHOLDER
        logger.info("Current content: %s", shown)
        return shown


# ---------- Concrete commands ----------

class NewDocumentCommand(MenuCommand):
    def __init__(self, editor: DocumentEditor) -> None:
        super().__init__(description="New")
        self._editor = editor

    def execute(self) -> None:
        self._editor.new_document()


class OpenDocumentCommand(MenuCommand):
    """
    Opens a fixed file; the filename is the command's parameter.

    :param editor: Receiver.
    :param filename: File to open when executed.
    """

    def __init__(self, editor: DocumentEditor, filename: str) -> None:
        super().__init__(description=f"Open {filename}")
        self._editor = editor
        self._filename = filename

    def execute(self) -> None:
        self._editor.open_document(self._filename)


class SaveDocumentCommand(MenuCommand):
    def __init__(self, editor: DocumentEditor) -> None:
        super().__init__(description="Save")
        self._editor = editor

    def execute(self) -> None:
        self._editor.save_document()


class CopyTextCommand(MenuCommand):
    def __init__(self, editor: DocumentEditor) -> None:
        super().__init__(description="Copy")
        self._editor = editor

    def execute(self) -> None:
        self._editor.copy_text()


class PasteTextCommand(MenuCommand):
    def __init__(self, editor: DocumentEditor) -> None:
        super().__init__(description="Paste")
        self._editor = editor

    def execute(self) -> None:
        self._editor.paste_text()


# ---------- Invoker ----------

@dataclass(slots=True)
class MenuItem:
    """
    :param label: Text shown in the menu.
    :param command: Command run when the item is clicked.
    """
    label: str
    command: MenuCommand


class ContextMenu:
    """
    Invoker holding an ordered list of menu items.
    """

    def __init__(self) -> None:
        self._items: List[MenuItem] = []

    def add_menu_item(self, label: str, command: MenuCommand) -> None:
        """
        :param label: Item label.
        :param command: Command bound to the item.
        """
        self._items.append(MenuItem(label, command))

    def remove_menu_item(self, label: str) -> None:
        """
        Removes every item with `label`; unknown labels are ignored.

        :param label: Item label.
        """
        self._items = [item for item in self._items if item.label != label]

    def show_menu(self) -> List[str]:
        """
        :return: One "<n>. <label> (<description>)" line per item, numbered from 1.
        """
        lines = [
            f"{number}. {item.label} ({item.command.description})"
            for number, item in enumerate(self._items, start=1)
        ]
        for line in lines:
            logger.info("%s", line)
        return lines

    def click_menu_item(self, index: int) -> bool:
        """
        Simulates a user click on the item at `index` (0-based).

        :param index: Item position.
        :return: True if a command ran; False for an invalid index.
        """
        if not 0 <= index < len(self._items):
            logger.warning("Invalid menu item index: %d", index)
            return False
        item = self._items[index]
        logger.info("Clicked menu item: %s", item.label)
        item.command.execute()
        return True

    def replace_command(self, label: str, command: MenuCommand) -> bool:
        """
        Re-points the first item labelled `label` at a different command.

        :param label: Item label.
        :param command: New command.
        :return: True if an item was updated; False if no item has that label.
        """
        for item in self._items:
            if item.label == label:
                item.command = command
                logger.info("Updated command of menu item %r", label)
                return True
        return False

    def __len__(self) -> int:
        return len(self._items)


def parameterized_command_demo() -> List[str]:
    """
    Configures a menu, clicks through it and swaps a command at runtime.

    :return: Document content after opening, after copy+paste, and after the swapped open.
    """
    editor = DocumentEditor()

    menu = ContextMenu()
    menu.add_menu_item("New document", NewDocumentCommand(editor))
    menu.add_menu_item("Open report", OpenDocumentCommand(editor, "report.txt"))
    menu.add_menu_item("Save document", SaveDocumentCommand(editor))
    menu.add_menu_item("Copy content", CopyTextCommand(editor))
    menu.add_menu_item("Paste content", PasteTextCommand(editor))
    menu.show_menu()

    snapshots = []
    menu.click_menu_item(1)
    snapshots.append(editor.show_content())

    menu.click_menu_item(3)
    menu.click_menu_item(4)
    snapshots.append(editor.show_content())

    menu.replace_command("Open report", OpenDocumentCommand(editor, "readme.md"))
    menu.show_menu()
    menu.click_menu_item(1)
    snapshots.append(editor.show_content())

    return snapshots
