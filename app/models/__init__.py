from .models import Store

__all__ = ["Store"]
