
class Theme:
    """
    Side-view palette.
    Centralized source of truth for UI colors (desktop and dashboard).
    """
    # Backgrounds
    BG_MAIN = "#FFFFFF"
    GRID = "#E5E7EB"
    REFERENCE_LINE = "#3B82F6" # Front plane / top plane

    # Bodies
    SYSTEM_FILL = "rgba(31, 41, 55, 0.9)"
    SYSTEM_EDGE = "#111827"
    LCD_FILL = "rgba(239, 68, 68, 0.7)"
    LCD_EDGE = "#B91C1C"
    PIVOT = "#10B981"
    TRACE = "rgba(239, 68, 68, 0.4)"

    # Status
    SUCCESS = "#22C55E"
    WARNING = "#EAB308"
    ERROR = "#EF4444"
    SUCCESS_BG = "#F0FDF4"
    WARNING_BG = "#FEFCE8"
    ERROR_BG = "#FEF2F2"

    # Text
    TEXT_MAIN = "#374151"
    TEXT_DIM = "#6B7280"

    @staticmethod
    def status_color(status) -> str:
        key = getattr(status, "value", status)
        return {"COLLISION": Theme.ERROR, "WARNING": Theme.WARNING}.get(key, Theme.SUCCESS)

    @staticmethod
    def status_background(status) -> str:
        key = getattr(status, "value", status)
        return {"COLLISION": Theme.ERROR_BG, "WARNING": Theme.WARNING_BG}.get(key, Theme.SUCCESS_BG)
