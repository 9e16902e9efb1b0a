from .main import USAGE, app, ctx_store, main

__all__ = ["USAGE", "app", "ctx_store", "main"]
