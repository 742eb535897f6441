"""Server — ASGI request pipeline and uvicorn runner."""
