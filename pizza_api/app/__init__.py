"""
Application package initializer.

The package is organised as ``core`` (settings and logging),
``schemas`` (pydantic models), ``services`` (catalog, lookup and
response shaping), ``api`` (versioned FastAPI routers) and
``handlers`` (non-HTTP invocation adapters).
"""
