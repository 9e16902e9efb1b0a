"""
Terminal UI for shellmenu: selector, session loop and CLI.
"""
