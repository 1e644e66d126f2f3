"""
Motus Clipboard - Copy the generated password to the system clipboard.

Uses the Qt clipboard. A failure here is reported and never affects the
password already printed to the user.
"""

import os
import subprocess
import sys

from motus.core.log import get_logger

logger = get_logger('clipboard')

# Seconds allowed for the Qt platform check
PLATFORM_CHECK_TIMEOUT = 10.0

_PLATFORM_CHECK = (
    "import sys\n"
    "from PyQt6.QtGui import QGuiApplication\n"
    "QGuiApplication(sys.argv[:1])\n"
)


def has_display() -> bool:
    """Check whether a graphical session is configured."""
    if sys.platform.startswith("linux"):
        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
    return True


def qt_platform_available(timeout: float = PLATFORM_CHECK_TIMEOUT) -> bool:
    """
    Check that Qt can initialize its platform plugin.

    Qt aborts the whole process when no platform plugin can be loaded (for
    instance a stale DISPLAY over SSH), so the attempt runs in a child
    interpreter first.

    Returns:
        True if a QGuiApplication could be created
    """
    try:
        result = subprocess.run(
            [sys.executable, "-c", _PLATFORM_CHECK],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.debug("Qt platform check did not complete: %s", e)
        return False

    if result.returncode != 0:
        logger.debug("Qt platform check exited with %d: %s", result.returncode,
                     result.stderr.decode(errors="replace").strip())
        return False
    return True


def copy_to_clipboard(text: str) -> bool:
    """
    Place text on the clipboard.

    Args:
        text: The password to copy

    Returns:
        True if the clipboard now holds text, False otherwise
    """
    if not has_display():
        logger.warning("No display available, clipboard copy skipped")
        return False

    try:
        from PyQt6.QtGui import QGuiApplication
    except ImportError as e:
        logger.warning("Clipboard unavailable (PyQt6 not importable): %s", e)
        return False

    app = QGuiApplication.instance()
    if app is None:
        if not qt_platform_available():
            logger.warning("Clipboard unavailable (no usable Qt platform plugin)")
            return False
        app = QGuiApplication(sys.argv[:1])

    clipboard = app.clipboard()
    if clipboard is None:
        logger.warning("Clipboard unavailable on this platform")
        return False

    clipboard.setText(text)
    # Let the platform plugin take ownership before the process exits
    app.processEvents()

    copied = clipboard.text() == text
    if not copied:
        logger.warning("Clipboard did not accept the password")
    return copied
