from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Dict, List, Optional, Type

logger = logging.getLogger(__name__)

__all__ = [
    "Editor",
    "Command",
    "CopyCommand",
    "CutCommand",
    "PasteCommand",
    "UndoCommand",
    "EditAction",
    "CommandHistory",
    "Application",
    "command_undo_demo",
]

# ==========================
# Module: editor_undo_command
# Purpose: Encapsulate clipboard edits as Commands that back up the editor text
#          before mutating it, so the Application can undo them from a history stack.
# ==========================


class Editor:
    """
    Receiver holding the document text and a half-open selection [start, end).

    :param text: Initial document content.
    """

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.selection_start = 0
        self.selection_end = 0

    def set_selection(self, start: int, end: int) -> None:
        """
        Selects text[start:end]; both bounds are clamped to the text, and end never precedes start.

        :param start: Requested start index.
        :param end: Requested end index (exclusive).
        """
        length = len(self.text)
        self.selection_start = max(0, min(start, length))
        self.selection_end = max(self.selection_start, min(end, length))

    def get_selection(self) -> str:
        """
        :return: The currently selected substring.
        """
        return self.text[self.selection_start: self.selection_end]

    def delete_selection(self) -> None:
        """
        Removes the selected text and collapses the selection at its start.
        """
        self.text = self.text[: self.selection_start] + self.text[self.selection_end:]
        self.selection_end = self.selection_start

    def replace_selection(self, text: str) -> None:
        """
        Splices `text` over the selection; the selection then wraps the inserted text.

        :param text: Replacement text.
        """
        self.text = self.text[: self.selection_start] + text + self.text[self.selection_end:]
        self.selection_end = self.selection_start + len(text)


class Command(ABC):
    """
    Base interface for editor actions with backup-based undo.

    Commands keep plain references to the application and editor they act on;
    both outlive the command.

    :param app: Owning application (clipboard and history live there).
    :param editor: Editor the command manipulates.
    """

    description = "Command"

    def __init__(self, app: Application, editor: Editor) -> None:
        self.app = app
        self.editor = editor
        self.backup = ""

    def save_backup(self) -> None:
        """
        Snapshots the editor text. Mutating commands call this before they mutate.
        """
        self.backup = self.editor.text

    def undo(self) -> None:
        """
        Restores the editor text from the backup. The selection is left as is.
        """
        self.editor.text = self.backup

    @abstractmethod
    def execute(self) -> bool:
        """
        Performs the action.

        :return: True if state changed and the command must be kept for undo.
        """


class CopyCommand(Command):
    """Copies the selection into the application clipboard."""

    description = "Copy"

    def execute(self) -> bool:
        self.app.clipboard = self.editor.get_selection()
        return False


class CutCommand(Command):
    """Moves the selection into the clipboard and deletes it from the text."""

    description = "Cut"

    def execute(self) -> bool:
        self.save_backup()
        self.app.clipboard = self.editor.get_selection()
        self.editor.delete_selection()
        return True


class PasteCommand(Command):
    """Replaces the selection with the clipboard contents."""

    description = "Paste"

    def execute(self) -> bool:
        self.save_backup()
        self.editor.replace_selection(self.app.clipboard)
        return True


class UndoCommand(Command):
    """Asks the application to undo the latest change; never recorded itself."""

    description = "Undo"

    def execute(self) -> bool:
        self.app.undo()
        return False


class EditAction(Enum):
    """The closed set of editor actions an Application can build commands for."""
    COPY = auto()
    CUT = auto()
    PASTE = auto()
    UNDO = auto()


_COMMANDS: Dict[EditAction, Type[Command]] = {
    EditAction.COPY: CopyCommand,
    EditAction.CUT: CutCommand,
    EditAction.PASTE: PasteCommand,
    EditAction.UNDO: UndoCommand,
}


class CommandHistory:
    """
    Unbounded LIFO stack of executed, state-changing commands.
    """

    def __init__(self) -> None:
        self._history: List[Command] = []

    def push(self, command: Command) -> None:
        """
        :param command: Command to record.
        """
        self._history.append(command)

    def pop(self) -> Optional[Command]:
        """
        Removes the most recent command.

        :return: The command, or None when the history is empty.
        """
        if not self._history:
            return None
        return self._history.pop()

    def __len__(self) -> int:
        return len(self._history)


class Application:
    """
    Coordinates command execution for a single active editor.

    Holds the shared clipboard and the undo history. There is no redo stack:
    an undone command is discarded.

    :param active_editor: Editor commands act upon; a blank one is created if omitted.
    """

    def __init__(self, active_editor: Optional[Editor] = None) -> None:
        self.clipboard = ""
        self.editors: List[Editor] = []
        self.active_editor = active_editor if active_editor is not None else Editor()
        self.history = CommandHistory()

    def create_command(self, action: EditAction) -> Command:
        """
        Builds the command for `action`, bound to this application and its active editor.

        :param action: Editor action to perform.
        :return: A new, not yet executed command.
        :raises ValueError: If `action` is not an EditAction.
        """
        try:
            command_cls = _COMMANDS[action]
        except KeyError as exc:
            raise ValueError(f"Unknown edit action: {action!r}") from exc
        return command_cls(self, self.active_editor)

    def execute_command(self, command: Command) -> None:
        """
        Executes a command and records it only if it changed state.

        :param command: Command to execute.
        """
        if command.execute():
            self.history.push(command)
            logger.debug("Executed %s; history size %d", command.description, len(self.history))
        else:
            logger.debug("Executed %s; not recorded", command.description)

    def undo(self) -> None:
        """
        Undoes the most recent state-changing command. No-op on an empty history.
        """
        command = self.history.pop()
        if command is None:
            logger.debug("Nothing to undo")
            return
        command.undo()
        logger.debug("Undid %s", command.description)


def command_undo_demo() -> str:
    """
    Copy -> Cut -> Paste -> Undo on "Hello World".

    :return: Clipboard/text checkpoints joined with " | ".
    """
    editor = Editor("Hello World")
    editor.set_selection(6, 11)
    app = Application(editor)

    app.execute_command(CopyCommand(app, editor))
    after_copy = f"clipboard={app.clipboard}"

    app.execute_command(CutCommand(app, editor))
    after_cut = f"text={editor.text}"

    editor.set_selection(5, 5)
    app.execute_command(PasteCommand(app, editor))
    after_paste = f"text={editor.text}"

    app.execute_command(UndoCommand(app, editor))
    after_undo = f"text={editor.text}"

    return " | ".join([after_copy, after_cut, after_paste, after_undo])
