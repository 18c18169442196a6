"""Open the clipboard contents in a GUI editor."""

from typing import Optional

from ..utils.process import CommandRunner, Invocation

# Scratch buffer, paste the + register, drop the empty first line,
# and make ZZ copy the buffer back to the clipboard before quitting.
CLIPBOARD_EDITOR_ARGS = [
    "-c", "setlocal buftype=nofile bufhidden=wipe noswapfile",
    "-c", "silent put +",
    "-c", "silent 1delete _",
    "-c", "normal! gg0",
    "-c", "nnoremap <buffer> ZZ :%yank +<CR>:quit!<CR>",
]


def build_clipboard_invocation(editor: str = "gvim") -> Invocation:
    return Invocation(editor, list(CLIPBOARD_EDITOR_ARGS))


def open_clipboard(
    editor: str = "gvim",
    runner: Optional[CommandRunner] = None,
) -> Invocation:
    """Launch the editor on the clipboard without waiting for it."""
    runner = runner or CommandRunner()
    invocation = build_clipboard_invocation(editor)
    runner.launch(invocation)
    return invocation
