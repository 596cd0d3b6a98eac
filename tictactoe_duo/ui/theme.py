from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette, QColor

DISABLED_TEXT_COLOR = QColor(187, 187, 187)
TEXT_COLOR = QColor(55, 65, 81)
BUTTON_COLOR = QColor(228, 233, 240)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_theme_palette(app: QApplication, theme):
    """
    Apply the light theme palette built from the theme colors.
    """
    app.setStyle('Fusion')
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.Window, QColor(theme.secondary))
    palette.setColor(QPalette.WindowText, QColor(theme.primary))
    palette.setColor(QPalette.Base, QColor(theme.secondary))
    palette.setColor(QPalette.AlternateBase, QColor(theme.win_background))
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, TEXT_COLOR)
    palette.setColor(QPalette.Highlight, QColor(theme.primary))
    palette.setColor(QPalette.HighlightedText, QColor(theme.secondary))
    palette.setColor(QPalette.PlaceholderText, QColor(theme.muted_text))
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)
    return palette
