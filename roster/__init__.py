# ==============================================
# Staff Roster
# ==============================================
#
# Package Structure (3 Components + Shell):
#
# roster/
# ├── codec/          # Component 1: Delimited text <-> rows
# ├── store/          # Component 2: In-memory employee records
# ├── persistence/    # Component 3: Load/flush the store from/to disk
# ├── shell.py        # Interactive menu driving the store
# ├── errors.py       # Error hierarchy
# ├── config.py       # Configuration management
# └── cli.py          # Command line entry point
#
# ==============================================

__version__ = "0.1.0"
