"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.

Import from the submodules directly; entities import ``stock_status`` while
this package is still initializing, so nothing is re-exported here.
"""
