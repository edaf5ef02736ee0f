# ==============================================
# COMPONENT 1: DELIMITED CODEC
# ==============================================
#
# This package converts between raw delimited text and
# ordered rows of field strings. It knows nothing about
# employees; the store gives the fields their meaning.
#
# Modules:
# --------
# - delimited.py  → decode(text) / encode(rows)
#
# ==============================================

from .delimited import DELIMITER, LINE_TERMINATOR, decode, encode

__all__ = ["DELIMITER", "LINE_TERMINATOR", "decode", "encode"]
