from sm_ui.wiring.dependencies import LauncherContext

__all__ = ["LauncherContext"]
