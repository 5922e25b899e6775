"""
Terminal todo list and calculator.

Components:
- tasks/: Task record and the in-memory TaskStore
- core/: command parser, ports and per-session state
- cli/: command registry, composition root and entry points
- connectors/: console REPL loop over a pluggable line source
- calc/: interactive four-function calculator
"""
