"""
PromptVEO UI Module

CustomTkinter desktop UI for the scene studio.
"""

from promptveo.ui.main_window import SceneStudioWindow
from promptveo.ui.theme import theme, PromptVeoTheme


def run_app(session, config):
    """
    Launch the desktop UI.

    Creates and runs the main SceneStudioWindow.
    """
    app = SceneStudioWindow(session, config)
    app.mainloop()


__all__ = [
    'run_app',
    'SceneStudioWindow',
    'theme',
    'PromptVeoTheme',
]
