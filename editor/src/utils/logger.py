"""Global logging and error handling utilities"""
import logging
import os
import sys
import traceback
from PyQt5.QtWidgets import QMessageBox

# Detect debug mode - True if running from source, False if packaged.
# TRUESIZE_RELEASE=1 forces release behaviour when running from source.
DEBUG_MODE = not getattr(sys, 'frozen', False) and os.environ.get('TRUESIZE_RELEASE') != '1'

_main_window = None
_logger = logging.getLogger('errors')

def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window

def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Logs the full traceback
        - Shows popup with user message or exception string
        - Then raises the exception
    """
    if DEBUG_MODE:
        # Dev mode: just raise to see full traceback
        raise e

    tb = ''.join(traceback.format_exception(type(e), e, e.__traceback__))
    _logger.error(f"{user_message or title}: {tb}")

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, f"{message}\n\n{e}")
    else:
        # Fallback if no main window set
        _logger.error(f"ERROR POPUP (no window): {title} - {message}")

    # Re-raise so application can handle it appropriately
    raise e
