# ==============================================
# COMPONENT 3: PERSISTENCE
# ==============================================
#
# This package loads the employee file into the store at
# startup and flushes the full store back to the same file.
#
# Modules:
# --------
# - gateway.py  → PersistenceGateway (load_from / save_to)
#
# ==============================================

from .gateway import PersistenceGateway

__all__ = ["PersistenceGateway"]
